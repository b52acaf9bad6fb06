from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.money import (
    require_finite,
    require_non_negative,
    require_positive,
    require_whole_periods,
)


@dataclass(frozen=True, slots=True)
class LoanTerms:
    principal: Decimal
    annual_rate_percent: Decimal
    tenure_months: int

    def validate(self) -> None:
        require_finite("principal", self.principal)
        require_finite("annual_rate_percent", self.annual_rate_percent)
        require_non_negative("principal", self.principal)
        require_non_negative("annual_rate_percent", self.annual_rate_percent)
        require_whole_periods("tenure_months", self.tenure_months)


@dataclass(frozen=True, slots=True)
class ScheduleTerms:
    """
    Loan terms plus the installment actually being paid each month.

    emi = 0 is accepted only for a zero principal loan, whose EMI is 0.
    """

    loan: LoanTerms
    emi: Decimal

    def validate(self) -> None:
        self.loan.validate()
        require_finite("emi", self.emi)
        if self.loan.principal == 0:
            require_non_negative("emi", self.emi)
        else:
            require_positive("emi", self.emi)


@dataclass(frozen=True, slots=True)
class EMIResult:
    emi: Decimal
    total_amount: Decimal
    total_interest: Decimal


@dataclass(frozen=True, slots=True)
class AmortizationEntry:
    month: int
    emi: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal
