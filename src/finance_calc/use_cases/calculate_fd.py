from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.investment import DEFAULT_COMPOUNDING_FREQUENCY, FDResult, FDTerms
from finance_calc.domain.money import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ONE,
    overflow_guard,
    round_currency,
    to_decimal,
)


@dataclass(frozen=True, slots=True)
class CalculateFD:
    """
    Maturity of a fixed deposit with periodic compounding.

    A = P * (1 + r/n)^(n*t), with t = tenure_months / 12 (fractional years allowed).
    """

    def execute(self, terms: FDTerms) -> FDResult:
        terms.validate()

        frequency = Decimal(terms.compounding_frequency)
        years = Decimal(terms.tenure_months) / MONTHS_PER_YEAR
        rate = terms.annual_rate_percent / HUNDRED

        with overflow_guard("fd"):
            maturity_value = terms.principal * (ONE + rate / frequency) ** (frequency * years)

            return FDResult(
                maturity_value=round_currency(maturity_value),
                interest_earned=round_currency(maturity_value - terms.principal),
            )


def calculate_fd(
    principal: Decimal | int | str,
    annual_rate_percent: Decimal | int | str,
    tenure_months: int,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY,
) -> FDResult:
    terms = FDTerms(
        principal=to_decimal("principal", principal),
        annual_rate_percent=to_decimal("annual_rate_percent", annual_rate_percent),
        tenure_months=tenure_months,
        compounding_frequency=compounding_frequency,
    )
    return CalculateFD().execute(terms)
