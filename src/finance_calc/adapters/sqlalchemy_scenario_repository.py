"""SQLAlchemy implementation of ScenarioRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from finance_calc.domain.errors import InternalError
from finance_calc.domain.scenario import CalculatorType, SavedScenario
from finance_calc.infra.db.models.scenario import ScenarioRow
from finance_calc.ports.scenario_repository import ScenarioRepository

logger = logging.getLogger(__name__)


class SqlAlchemyScenarioRepository(ScenarioRepository):
    """
    SQLAlchemy implementation of ScenarioRepository.

    - Works against any SQLAlchemy 2.0 engine (PostgreSQL in deployment, SQLite in tests)
    - inputs/results are stored in JSON columns as-is
    - Converts ScenarioRow (infrastructure) to SavedScenario (domain)
    - Never commits; the per-request session owner does
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def add(self, scenario: SavedScenario) -> None:
        self._session.add(self._to_row(scenario))
        self._session.flush()
        logger.debug("Scenario stored", extra={"scenario_id": scenario.id})

    def get_by_id(self, scenario_id: str) -> SavedScenario | None:
        row = self._session.get(ScenarioRow, scenario_id)
        return self._to_domain(row) if row else None

    def find_all(self, calculator_type: CalculatorType | None = None) -> list[SavedScenario]:
        query = select(ScenarioRow).order_by(ScenarioRow.created_at, ScenarioRow.id)
        if calculator_type is not None:
            query = query.where(ScenarioRow.type == calculator_type.value)

        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def update(self, scenario: SavedScenario) -> bool:
        row = self._session.get(ScenarioRow, scenario.id)
        if row is None:
            return False

        row.name = scenario.name
        row.type = scenario.type.value
        row.inputs = scenario.inputs
        row.results = scenario.results
        row.notes = scenario.notes
        row.updated_at = scenario.updated_at
        self._session.flush()
        logger.debug("Scenario updated", extra={"scenario_id": scenario.id})
        return True

    def delete(self, scenario_id: str) -> bool:
        result = self._session.execute(delete(ScenarioRow).where(ScenarioRow.id == scenario_id))
        deleted = bool(result.rowcount)
        if deleted:
            logger.debug("Scenario deleted", extra={"scenario_id": scenario_id})
        return deleted

    @staticmethod
    def _to_row(scenario: SavedScenario) -> ScenarioRow:
        return ScenarioRow(
            id=scenario.id,
            name=scenario.name,
            type=scenario.type.value,
            inputs=scenario.inputs,
            results=scenario.results,
            notes=scenario.notes,
            created_at=scenario.created_at,
            updated_at=scenario.updated_at,
        )

    @staticmethod
    def _to_domain(row: ScenarioRow) -> SavedScenario:
        """
        Convert database model (ScenarioRow) to domain entity (SavedScenario).

        Raises:
            InternalError: If the stored calculator type is no longer known
        """
        try:
            calculator_type = CalculatorType(row.type)
        except ValueError as exc:
            raise InternalError(
                f"Stored scenario has unknown calculator type: {row.type}",
                scenario_id=row.id,
            ) from exc

        return SavedScenario(
            id=row.id,
            name=row.name,
            type=calculator_type,
            inputs=dict(row.inputs),
            results=dict(row.results),
            notes=row.notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
