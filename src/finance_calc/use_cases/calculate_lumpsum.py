from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.investment import CAGRTerms, LumpsumResult, LumpsumTerms
from finance_calc.domain.money import HUNDRED, ONE, overflow_guard, round_currency, to_decimal


@dataclass(frozen=True, slots=True)
class CalculateLumpsum:
    """One-time investment compounded annually: A = P * (1 + r)^t."""

    def execute(self, terms: LumpsumTerms) -> LumpsumResult:
        terms.validate()

        growth = ONE + terms.annual_return_percent / HUNDRED
        with overflow_guard("lumpsum"):
            maturity_value = terms.principal * growth**terms.years

            return LumpsumResult(
                maturity_value=round_currency(maturity_value),
                wealth_gained=round_currency(maturity_value - terms.principal),
            )


@dataclass(frozen=True, slots=True)
class CalculateCAGR:
    """
    Compound annual growth rate, in percent, between two values.

    Inverse of CalculateLumpsum: a lumpsum maturity fed back in recovers
    the original annual return. Not rounded.
    """

    def execute(self, terms: CAGRTerms) -> Decimal:
        terms.validate()

        with overflow_guard("cagr"):
            ratio = terms.final_value / terms.initial_value
            return (ratio ** (ONE / terms.years) - ONE) * HUNDRED


def calculate_lumpsum(
    principal: Decimal | int | str,
    annual_return_percent: Decimal | int | str,
    years: Decimal | int | str,
) -> LumpsumResult:
    terms = LumpsumTerms(
        principal=to_decimal("principal", principal),
        annual_return_percent=to_decimal("annual_return_percent", annual_return_percent),
        years=to_decimal("years", years),
    )
    return CalculateLumpsum().execute(terms)


def calculate_cagr(
    initial_value: Decimal | int | str,
    final_value: Decimal | int | str,
    years: Decimal | int | str,
) -> Decimal:
    terms = CAGRTerms(
        initial_value=to_decimal("initial_value", initial_value),
        final_value=to_decimal("final_value", final_value),
        years=to_decimal("years", years),
    )
    return CalculateCAGR().execute(terms)
