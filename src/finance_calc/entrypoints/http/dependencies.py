"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless calculators and the process-wide in-memory store are shared.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from finance_calc.adapters.in_memory_scenario_repository import InMemoryScenarioRepository
from finance_calc.adapters.sqlalchemy_scenario_repository import SqlAlchemyScenarioRepository
from finance_calc.infra.config import SCENARIO_STORE_MEMORY, scenario_store
from finance_calc.infra.db.session import get_session
from finance_calc.ports.scenario_repository import ScenarioRepository
from finance_calc.use_cases.calculate_emi import CalculateEMI, GenerateAmortizationSchedule
from finance_calc.use_cases.calculate_fd import CalculateFD
from finance_calc.use_cases.calculate_lumpsum import CalculateCAGR, CalculateLumpsum
from finance_calc.use_cases.calculate_nps import CalculateNPS
from finance_calc.use_cases.calculate_sip import CalculateSIP, CalculateStepUpSIP
from finance_calc.use_cases.calculate_swp import CalculateSWP
from finance_calc.use_cases.get_scenario import GetScenario, ListScenarios
from finance_calc.use_cases.save_scenario import DeleteScenario, SaveScenario, UpdateScenario


# ==============================================================================
# Calculators (pure, stateless)
# ==============================================================================


def get_calculate_emi_use_case() -> CalculateEMI:
    return CalculateEMI()


def get_amortization_schedule_use_case() -> GenerateAmortizationSchedule:
    return GenerateAmortizationSchedule()


def get_calculate_sip_use_case() -> CalculateSIP:
    return CalculateSIP()


def get_calculate_step_up_sip_use_case() -> CalculateStepUpSIP:
    return CalculateStepUpSIP()


def get_calculate_fd_use_case() -> CalculateFD:
    return CalculateFD()


def get_calculate_lumpsum_use_case() -> CalculateLumpsum:
    return CalculateLumpsum()


def get_calculate_cagr_use_case() -> CalculateCAGR:
    return CalculateCAGR()


def get_calculate_swp_use_case() -> CalculateSWP:
    return CalculateSWP()


def get_calculate_nps_use_case() -> CalculateNPS:
    return CalculateNPS()


# ==============================================================================
# Scenario storage
# ==============================================================================


@lru_cache(maxsize=1)
def get_in_memory_scenario_repository() -> InMemoryScenarioRepository:
    """Process-wide store used when SCENARIO_STORE=memory."""
    return InMemoryScenarioRepository()


def get_scenario_repository() -> Generator[ScenarioRepository, None, None]:
    """
    Provides the scenario repository for a single request.

    With SCENARIO_STORE=database each request gets a fresh session; the
    underlying get_session() context manager commits on success, rolls
    back on exception and always closes the session.

    Yields:
        ScenarioRepository: Configured repository (per-request)
    """
    if scenario_store() == SCENARIO_STORE_MEMORY:
        yield get_in_memory_scenario_repository()
        return

    with get_session() as session:
        yield SqlAlchemyScenarioRepository(session=session)


def get_save_scenario_use_case(
    repository: ScenarioRepository = Depends(get_scenario_repository),
) -> SaveScenario:
    return SaveScenario(scenario_repository=repository)


def get_update_scenario_use_case(
    repository: ScenarioRepository = Depends(get_scenario_repository),
) -> UpdateScenario:
    return UpdateScenario(scenario_repository=repository)


def get_get_scenario_use_case(
    repository: ScenarioRepository = Depends(get_scenario_repository),
) -> GetScenario:
    return GetScenario(scenario_repository=repository)


def get_list_scenarios_use_case(
    repository: ScenarioRepository = Depends(get_scenario_repository),
) -> ListScenarios:
    return ListScenarios(scenario_repository=repository)


def get_delete_scenario_use_case(
    repository: ScenarioRepository = Depends(get_scenario_repository),
) -> DeleteScenario:
    return DeleteScenario(scenario_repository=repository)
