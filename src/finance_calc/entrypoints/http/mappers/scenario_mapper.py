from __future__ import annotations

from finance_calc.domain.scenario import SavedScenario
from finance_calc.entrypoints.http.dtos.scenarios import (
    ScenarioCreateDTO,
    ScenarioListResponseDTO,
    ScenarioResponseDTO,
    ScenarioUpdateDTO,
)
from finance_calc.use_cases.save_scenario import SaveScenarioRequest, UpdateScenarioRequest


class ScenarioMapper:
    """Maps between REST DTOs and saved scenario use case requests/entities."""

    @staticmethod
    def to_save_request(dto: ScenarioCreateDTO) -> SaveScenarioRequest:
        return SaveScenarioRequest(
            name=dto.name,
            type=dto.type,
            inputs=dict(dto.inputs),
            notes=dto.notes,
        )

    @staticmethod
    def to_update_request(scenario_id: str, dto: ScenarioUpdateDTO) -> UpdateScenarioRequest:
        return UpdateScenarioRequest(
            scenario_id=scenario_id,
            name=dto.name,
            inputs=dict(dto.inputs) if dto.inputs is not None else None,
            notes=dto.notes,
        )

    @staticmethod
    def to_response(scenario: SavedScenario) -> ScenarioResponseDTO:
        return ScenarioResponseDTO(
            id=scenario.id,
            name=scenario.name,
            type=scenario.type,
            inputs=scenario.inputs,
            results=scenario.results,
            notes=scenario.notes,
            created_at=scenario.created_at,
            updated_at=scenario.updated_at,
        )

    @staticmethod
    def to_list_response(scenarios: list[SavedScenario]) -> ScenarioListResponseDTO:
        return ScenarioListResponseDTO(
            scenarios=[ScenarioMapper.to_response(scenario) for scenario in scenarios],
            total=len(scenarios),
        )
