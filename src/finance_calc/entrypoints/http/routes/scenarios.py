from fastapi import APIRouter, Depends, Response, status

from finance_calc.domain.scenario import CalculatorType
from finance_calc.entrypoints.http.dependencies import (
    get_delete_scenario_use_case,
    get_get_scenario_use_case,
    get_list_scenarios_use_case,
    get_save_scenario_use_case,
    get_update_scenario_use_case,
)
from finance_calc.entrypoints.http.dtos.scenarios import (
    ScenarioCreateDTO,
    ScenarioListResponseDTO,
    ScenarioResponseDTO,
    ScenarioUpdateDTO,
)
from finance_calc.entrypoints.http.error_responses import ErrorResponse
from finance_calc.entrypoints.http.mappers.scenario_mapper import ScenarioMapper
from finance_calc.use_cases.get_scenario import (
    GetScenario,
    GetScenarioRequest,
    ListScenarios,
    ListScenariosRequest,
)
from finance_calc.use_cases.save_scenario import (
    DeleteScenario,
    DeleteScenarioRequest,
    SaveScenario,
    UpdateScenario,
)


router = APIRouter(prefix="/scenarios", tags=["Scenarios"])

NOT_FOUND_RESPONSE = {
    404: {
        "model": ErrorResponse,
        "description": "Scenario not found",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Scenario with identifier "
                    "'550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                }
            }
        },
    }
}
VALIDATION_RESPONSE = {422: {"model": ErrorResponse, "description": "Validation error"}}


@router.post(
    "",
    response_model=ScenarioResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Save a calculator scenario",
    description="""
    Store named calculator inputs. Results are computed by the calculation
    engine at save time; any submitted results would be ignored.

    Inputs per calculator type:
    - emi: principal, annual_rate_percent, tenure_months
    - sip: monthly_investment, annual_return_percent, years
    - fd: principal, annual_rate_percent, tenure_months, compounding_frequency (optional)
    - lumpsum: principal, annual_return_percent, years
    - swp: corpus, monthly_withdrawal, annual_return_percent, years
    - nps: monthly_contribution, annual_return_percent, years, annuity_rate_percent (optional)
    """,
    responses=VALIDATION_RESPONSE,
)
def save_scenario(
    payload: ScenarioCreateDTO,
    use_case: SaveScenario = Depends(get_save_scenario_use_case),
) -> ScenarioResponseDTO:
    scenario = use_case.execute(ScenarioMapper.to_save_request(payload))
    return ScenarioMapper.to_response(scenario)


@router.get(
    "",
    response_model=ScenarioListResponseDTO,
    summary="List saved scenarios",
    description="All saved scenarios, oldest first, optionally filtered by calculator type.",
)
def list_scenarios(
    type: CalculatorType | None = None,
    use_case: ListScenarios = Depends(get_list_scenarios_use_case),
) -> ScenarioListResponseDTO:
    scenarios = use_case.execute(ListScenariosRequest(calculator_type=type))
    return ScenarioMapper.to_list_response(scenarios)


@router.get(
    "/{scenario_id}",
    response_model=ScenarioResponseDTO,
    summary="Get a saved scenario",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_scenario(
    scenario_id: str,
    use_case: GetScenario = Depends(get_get_scenario_use_case),
) -> ScenarioResponseDTO:
    scenario = use_case.execute(GetScenarioRequest(scenario_id=scenario_id))
    return ScenarioMapper.to_response(scenario)


@router.put(
    "/{scenario_id}",
    response_model=ScenarioResponseDTO,
    summary="Update a saved scenario",
    description="Rename, edit notes or replace inputs. New inputs are re-calculated.",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_scenario(
    scenario_id: str,
    payload: ScenarioUpdateDTO,
    use_case: UpdateScenario = Depends(get_update_scenario_use_case),
) -> ScenarioResponseDTO:
    scenario = use_case.execute(ScenarioMapper.to_update_request(scenario_id, payload))
    return ScenarioMapper.to_response(scenario)


@router.delete(
    "/{scenario_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a saved scenario",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def delete_scenario(
    scenario_id: str,
    use_case: DeleteScenario = Depends(get_delete_scenario_use_case),
) -> Response:
    use_case.execute(DeleteScenarioRequest(scenario_id=scenario_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
