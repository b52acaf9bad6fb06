from __future__ import annotations

from abc import ABC, abstractmethod

from finance_calc.domain.scenario import CalculatorType, SavedScenario


class ScenarioRepository(ABC):
    """
    Port for saved scenario storage.

    Simple create/read/update/delete semantics over JSON-serializable
    records. Listing returns scenarios oldest first.

    Contract (Preconditions):
        - scenarios are built and validated by the caller (UseCase)
        - implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def add(self, scenario: SavedScenario) -> None:
        """Store a new scenario."""
        ...

    @abstractmethod
    def get_by_id(self, scenario_id: str) -> SavedScenario | None:
        """Return the scenario, or None if no scenario has this ID."""
        ...

    @abstractmethod
    def find_all(self, calculator_type: CalculatorType | None = None) -> list[SavedScenario]:
        """Return all scenarios, optionally only those of one calculator type."""
        ...

    @abstractmethod
    def update(self, scenario: SavedScenario) -> bool:
        """
        Replace a stored scenario (matched by ID).

        Returns:
            True if a scenario was replaced, False if the ID is unknown
        """
        ...

    @abstractmethod
    def delete(self, scenario_id: str) -> bool:
        """
        Remove a scenario.

        Returns:
            True if a scenario was removed, False if the ID is unknown
        """
        ...
