#!/usr/bin/env python3
"""
Seed the scenarios table with a demo scenario for every calculator.

Features:
- Deterministic: fixed inputs → same results every run
- Idempotent: safe to run multiple times (clears before seeding)
- Results are computed by the calculation engine, never hard-coded

Usage:
    DATABASE_URL=sqlite:///scenarios.db python scripts/seed_scenarios.py
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from finance_calc.adapters.sqlalchemy_scenario_repository import SqlAlchemyScenarioRepository
from finance_calc.domain.formatting import format_large_number
from finance_calc.domain.scenario import CalculatorType
from finance_calc.infra.db.models.scenario import ScenarioRow
from finance_calc.infra.db.session import get_session
from finance_calc.use_cases.save_scenario import SaveScenario, SaveScenarioRequest


# ==============================================================================
# Demo scenarios
# ==============================================================================

DEMO_SCENARIOS: list[tuple[str, CalculatorType, dict[str, Any]]] = [
    (
        "Home loan 20y @ 8.5%",
        CalculatorType.EMI,
        {"principal": "2500000", "annual_rate_percent": "8.5", "tenure_months": 240},
    ),
    (
        "Index fund SIP",
        CalculatorType.SIP,
        {"monthly_investment": "10000", "annual_return_percent": "12", "years": 15},
    ),
    (
        "Bank FD 3y quarterly",
        CalculatorType.FD,
        {
            "principal": "500000",
            "annual_rate_percent": "7.1",
            "tenure_months": 36,
            "compounding_frequency": 4,
        },
    ),
    (
        "Bonus invested once",
        CalculatorType.LUMPSUM,
        {"principal": "200000", "annual_return_percent": "11", "years": "10"},
    ),
    (
        "Retirement drawdown",
        CalculatorType.SWP,
        {
            "corpus": "5000000",
            "monthly_withdrawal": "40000",
            "annual_return_percent": "8",
            "years": 20,
        },
    ),
    (
        "NPS Tier I",
        CalculatorType.NPS,
        {"monthly_contribution": "5000", "annual_return_percent": "10", "years": 30},
    ),
]

# Headline result shown for each calculator type
HEADLINE_RESULT = {
    CalculatorType.EMI: "emi",
    CalculatorType.SIP: "maturity_value",
    CalculatorType.FD: "maturity_value",
    CalculatorType.LUMPSUM: "maturity_value",
    CalculatorType.SWP: "remaining_corpus",
    CalculatorType.NPS: "monthly_pension",
}


def seed_scenarios() -> None:
    print(f"🌱 Seeding database with {len(DEMO_SCENARIOS)} scenarios...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing scenarios...")
        deleted_count = session.query(ScenarioRow).delete()
        print(f"   Deleted {deleted_count} existing scenarios")

        # Step 2: Compute and store the demo scenarios
        use_case = SaveScenario(scenario_repository=SqlAlchemyScenarioRepository(session))
        for name, calculator_type, inputs in DEMO_SCENARIOS:
            scenario = use_case.execute(
                SaveScenarioRequest(name=name, type=calculator_type, inputs=inputs)
            )
            headline = HEADLINE_RESULT[calculator_type]
            amount = format_large_number(int(scenario.results[headline]))
            print(f"   • [{calculator_type.value}] {name}: {headline} = {amount}")

        print(f"✅ Successfully seeded {len(DEMO_SCENARIOS)} scenarios!")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_scenarios()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
