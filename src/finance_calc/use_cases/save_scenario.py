"""Create, update and delete saved scenarios.

Results are never accepted from the caller: every save re-runs the
calculator on the submitted inputs, so a stored scenario always matches
what the engine produces for its inputs.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from finance_calc.domain.errors import NotFoundError
from finance_calc.domain.scenario import CalculatorType, SavedScenario, validate_scenario_text
from finance_calc.ports.scenario_repository import ScenarioRepository
from finance_calc.use_cases.get_scenario import validate_scenario_id
from finance_calc.use_cases.run_calculator import RunCalculator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class SaveScenarioRequest:
    name: str
    type: CalculatorType
    inputs: dict[str, Any]
    notes: str | None = None


class SaveScenario:
    def __init__(
        self,
        scenario_repository: ScenarioRepository,
        run_calculator: RunCalculator | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = scenario_repository
        self._run_calculator = run_calculator or RunCalculator()
        self._clock = clock

    def execute(self, request: SaveScenarioRequest) -> SavedScenario:
        """
        Raises:
            ValidationError: If name/notes are invalid or inputs are malformed
            InvalidCalculationInput: If inputs are out of the calculator's range
        """
        validate_scenario_text(request.name, request.notes)
        run = self._run_calculator.execute(request.type, request.inputs)

        now = self._clock()
        scenario = SavedScenario(
            id=str(uuid.uuid4()),
            name=request.name.strip(),
            type=request.type,
            inputs=run.inputs,
            results=run.results,
            notes=request.notes,
            created_at=now,
            updated_at=now,
        )
        self._repository.add(scenario)

        logger.info(
            "Scenario saved",
            extra={"scenario_id": scenario.id, "calculator_type": scenario.type.value},
        )
        return scenario


@dataclass(frozen=True, slots=True)
class UpdateScenarioRequest:
    """Fields left as None keep their stored value."""

    scenario_id: str
    name: str | None = None
    inputs: dict[str, Any] | None = None
    notes: str | None = None


class UpdateScenario:
    def __init__(
        self,
        scenario_repository: ScenarioRepository,
        run_calculator: RunCalculator | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = scenario_repository
        self._run_calculator = run_calculator or RunCalculator()
        self._clock = clock

    def execute(self, request: UpdateScenarioRequest) -> SavedScenario:
        """
        Raises:
            ValidationError: If the ID, name, notes or inputs are invalid
            NotFoundError: If no scenario has this ID
        """
        validate_scenario_id(request.scenario_id)

        current = self._repository.get_by_id(request.scenario_id)
        if current is None:
            raise NotFoundError(resource="Scenario", identifier=request.scenario_id)

        name = request.name if request.name is not None else current.name
        notes = request.notes if request.notes is not None else current.notes
        validate_scenario_text(name, notes)

        updated = replace(current, name=name.strip(), notes=notes, updated_at=self._clock())
        if request.inputs is not None:
            run = self._run_calculator.execute(current.type, request.inputs)
            updated = replace(updated, inputs=run.inputs, results=run.results)

        if not self._repository.update(updated):
            # Deleted between the read and the write
            raise NotFoundError(resource="Scenario", identifier=request.scenario_id)

        logger.info("Scenario updated", extra={"scenario_id": updated.id})
        return updated


@dataclass(frozen=True, slots=True)
class DeleteScenarioRequest:
    scenario_id: str


class DeleteScenario:
    def __init__(self, scenario_repository: ScenarioRepository) -> None:
        self._repository = scenario_repository

    def execute(self, request: DeleteScenarioRequest) -> None:
        """
        Raises:
            ValidationError: If scenario_id is not a valid UUID format
            NotFoundError: If no scenario has this ID
        """
        validate_scenario_id(request.scenario_id)

        if not self._repository.delete(request.scenario_id):
            raise NotFoundError(resource="Scenario", identifier=request.scenario_id)

        logger.info("Scenario deleted", extra={"scenario_id": request.scenario_id})
