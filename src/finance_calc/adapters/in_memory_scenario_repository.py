from __future__ import annotations

from finance_calc.domain.scenario import CalculatorType, SavedScenario
from finance_calc.ports.scenario_repository import ScenarioRepository


class InMemoryScenarioRepository(ScenarioRepository):
    """
    Canonical contract implementation for tests and single-process use.

    - Stores scenarios in insertion order
    - Update replaces in place, keeping the original position
    """

    def __init__(self, scenarios: list[SavedScenario] | None = None) -> None:
        self._scenarios: dict[str, SavedScenario] = {s.id: s for s in scenarios or []}

    def add(self, scenario: SavedScenario) -> None:
        self._scenarios[scenario.id] = scenario

    def get_by_id(self, scenario_id: str) -> SavedScenario | None:
        return self._scenarios.get(scenario_id)

    def find_all(self, calculator_type: CalculatorType | None = None) -> list[SavedScenario]:
        return [
            scenario
            for scenario in self._scenarios.values()
            if calculator_type is None or scenario.type is calculator_type
        ]

    def update(self, scenario: SavedScenario) -> bool:
        if scenario.id not in self._scenarios:
            return False
        self._scenarios[scenario.id] = scenario
        return True

    def delete(self, scenario_id: str) -> bool:
        return self._scenarios.pop(scenario_id, None) is not None
