"""Read saved scenarios."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from finance_calc.domain.errors import NotFoundError, ValidationError
from finance_calc.domain.scenario import CalculatorType, SavedScenario
from finance_calc.ports.scenario_repository import ScenarioRepository


def validate_scenario_id(scenario_id: str) -> None:
    try:
        UUID(scenario_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "scenario_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


@dataclass(frozen=True, slots=True)
class GetScenarioRequest:
    scenario_id: str


class GetScenario:
    """
    Use case for retrieving a single saved scenario by ID.

    Responsibilities:
    - Validate scenario_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the scenario doesn't exist
    """

    def __init__(self, scenario_repository: ScenarioRepository) -> None:
        self._repository = scenario_repository

    def execute(self, request: GetScenarioRequest) -> SavedScenario:
        """
        Raises:
            ValidationError: If scenario_id is not a valid UUID format
            NotFoundError: If no scenario has this ID
        """
        validate_scenario_id(request.scenario_id)

        scenario = self._repository.get_by_id(request.scenario_id)
        if scenario is None:
            raise NotFoundError(resource="Scenario", identifier=request.scenario_id)

        return scenario


@dataclass(frozen=True, slots=True)
class ListScenariosRequest:
    calculator_type: CalculatorType | None = None


class ListScenarios:
    def __init__(self, scenario_repository: ScenarioRepository) -> None:
        self._repository = scenario_repository

    def execute(self, request: ListScenariosRequest) -> list[SavedScenario]:
        return self._repository.find_all(calculator_type=request.calculator_type)
