from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.errors import InvalidCalculationInput
from finance_calc.domain.loan import AmortizationEntry, EMIResult, LoanTerms, ScheduleTerms
from finance_calc.domain.money import (
    ONE,
    ZERO,
    monthly_rate,
    overflow_guard,
    round_currency,
    to_decimal,
)


@dataclass(frozen=True, slots=True)
class CalculateEMI:
    """
    Calculate the equated monthly installment of a loan.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - emi, total_amount and total_interest are each rounded once, to whole
      currency units, with ROUND_HALF_UP
    - Totals are derived from the full precision emi, so
      total_amount == emi * tenure_months only up to rounding
    """

    def execute(self, terms: LoanTerms) -> EMIResult:
        terms.validate()

        principal = terms.principal
        if principal == 0:
            return EMIResult(emi=ZERO, total_amount=ZERO, total_interest=ZERO)

        with overflow_guard("emi"):
            emi = installment(principal, terms.annual_rate_percent, terms.tenure_months)
            total_amount = emi * terms.tenure_months
            total_interest = total_amount - principal

            return EMIResult(
                emi=round_currency(emi),
                total_amount=round_currency(total_amount),
                total_interest=round_currency(total_interest),
            )


def installment(principal: Decimal, annual_rate_percent: Decimal, tenure_months: int) -> Decimal:
    """
    Full precision monthly installment.

    emi = P * r * (1+r)^n / ((1+r)^n - 1), or P / n when r is zero.
    """
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return principal / Decimal(tenure_months)

    factor = (ONE + rate) ** tenure_months
    return principal * rate * factor / (factor - ONE)


@dataclass(frozen=True, slots=True)
class GenerateAmortizationSchedule:
    """
    Month-by-month principal/interest split of a loan.

    The outstanding balance is carried at full precision and clamped at zero;
    each entry's monetary fields are rounded for presentation only. Once the
    balance is paid off, the principal portion is capped at what is still
    owed, so later months report a zero principal portion.
    """

    def execute(self, terms: ScheduleTerms) -> list[AmortizationEntry]:
        return list(self.iterate(terms))

    def iterate(self, terms: ScheduleTerms) -> Iterator[AmortizationEntry]:
        """Lazy, single-pass view of the schedule in ascending month order."""
        terms.validate()

        loan = terms.loan
        rate = monthly_rate(loan.annual_rate_percent)
        first_interest = loan.principal * rate
        if loan.principal > 0 and terms.emi <= first_interest:
            raise InvalidCalculationInput(
                "emi must exceed the first month's interest "
                f"({round_currency(first_interest)})",
                field="emi",
            )

        return self._entries(loan.principal, rate, loan.tenure_months, terms.emi)

    @staticmethod
    def _entries(
        balance: Decimal, rate: Decimal, tenure_months: int, emi: Decimal
    ) -> Iterator[AmortizationEntry]:
        for month in range(1, tenure_months + 1):
            interest = balance * rate
            principal_portion = min(emi - interest, balance)
            balance = max(ZERO, balance - principal_portion)

            yield AmortizationEntry(
                month=month,
                emi=round_currency(emi),
                principal=round_currency(principal_portion),
                interest=round_currency(interest),
                balance=round_currency(balance),
            )


def calculate_emi(
    principal: Decimal | int | str,
    annual_rate_percent: Decimal | int | str,
    tenure_months: int,
) -> EMIResult:
    terms = LoanTerms(
        principal=to_decimal("principal", principal),
        annual_rate_percent=to_decimal("annual_rate_percent", annual_rate_percent),
        tenure_months=tenure_months,
    )
    return CalculateEMI().execute(terms)


def iter_amortization_schedule(
    principal: Decimal | int | str,
    annual_rate_percent: Decimal | int | str,
    tenure_months: int,
    emi: Decimal | int | str,
) -> Iterator[AmortizationEntry]:
    terms = ScheduleTerms(
        loan=LoanTerms(
            principal=to_decimal("principal", principal),
            annual_rate_percent=to_decimal("annual_rate_percent", annual_rate_percent),
            tenure_months=tenure_months,
        ),
        emi=to_decimal("emi", emi),
    )
    return GenerateAmortizationSchedule().iterate(terms)


def generate_amortization_schedule(
    principal: Decimal | int | str,
    annual_rate_percent: Decimal | int | str,
    tenure_months: int,
    emi: Decimal | int | str,
) -> list[AmortizationEntry]:
    return list(iter_amortization_schedule(principal, annual_rate_percent, tenure_months, emi))
