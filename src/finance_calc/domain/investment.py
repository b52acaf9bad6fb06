from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.errors import InvalidCalculationInput
from finance_calc.domain.money import (
    require_finite,
    require_non_negative,
    require_positive,
    require_return_rate,
    require_whole_periods,
)


# Times per year interest is compounded: yearly, half-yearly, quarterly, monthly, daily
ALLOWED_COMPOUNDING_FREQUENCIES = {1, 2, 4, 12, 365}
DEFAULT_COMPOUNDING_FREQUENCY = 4


# ==============================================================================
# SIP
# ==============================================================================


@dataclass(frozen=True, slots=True)
class SIPTerms:
    monthly_investment: Decimal
    annual_return_percent: Decimal
    years: int

    def validate(self) -> None:
        require_finite("monthly_investment", self.monthly_investment)
        require_finite("annual_return_percent", self.annual_return_percent)
        require_positive("monthly_investment", self.monthly_investment)
        require_return_rate("annual_return_percent", self.annual_return_percent)
        require_whole_periods("years", self.years)


@dataclass(frozen=True, slots=True)
class StepUpSIPTerms:
    initial_monthly_investment: Decimal
    annual_return_percent: Decimal
    years: int
    step_up_percent: Decimal

    def validate(self) -> None:
        require_finite("initial_monthly_investment", self.initial_monthly_investment)
        require_finite("annual_return_percent", self.annual_return_percent)
        require_finite("step_up_percent", self.step_up_percent)
        require_positive("initial_monthly_investment", self.initial_monthly_investment)
        require_return_rate("annual_return_percent", self.annual_return_percent)
        require_whole_periods("years", self.years)
        require_non_negative("step_up_percent", self.step_up_percent)


@dataclass(frozen=True, slots=True)
class SIPResult:
    maturity_value: Decimal
    total_investment: Decimal
    wealth_gained: Decimal


# ==============================================================================
# Fixed deposit
# ==============================================================================


@dataclass(frozen=True, slots=True)
class FDTerms:
    principal: Decimal
    annual_rate_percent: Decimal
    tenure_months: int
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY

    def validate(self) -> None:
        require_finite("principal", self.principal)
        require_finite("annual_rate_percent", self.annual_rate_percent)
        require_positive("principal", self.principal)
        require_return_rate("annual_rate_percent", self.annual_rate_percent)
        require_whole_periods("tenure_months", self.tenure_months)
        if self.compounding_frequency not in ALLOWED_COMPOUNDING_FREQUENCIES:
            raise InvalidCalculationInput(
                "compounding_frequency must be one of "
                f"{sorted(ALLOWED_COMPOUNDING_FREQUENCIES)}",
                field="compounding_frequency",
            )


@dataclass(frozen=True, slots=True)
class FDResult:
    maturity_value: Decimal
    interest_earned: Decimal


# ==============================================================================
# Lumpsum
# ==============================================================================


@dataclass(frozen=True, slots=True)
class LumpsumTerms:
    principal: Decimal
    annual_return_percent: Decimal
    years: Decimal

    def validate(self) -> None:
        require_finite("principal", self.principal)
        require_finite("annual_return_percent", self.annual_return_percent)
        require_finite("years", self.years)
        require_positive("principal", self.principal)
        require_return_rate("annual_return_percent", self.annual_return_percent)
        require_positive("years", self.years)


@dataclass(frozen=True, slots=True)
class LumpsumResult:
    maturity_value: Decimal
    wealth_gained: Decimal


# ==============================================================================
# CAGR
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CAGRTerms:
    initial_value: Decimal
    final_value: Decimal
    years: Decimal

    def validate(self) -> None:
        require_finite("initial_value", self.initial_value)
        require_finite("final_value", self.final_value)
        require_finite("years", self.years)
        require_positive("initial_value", self.initial_value)
        require_non_negative("final_value", self.final_value)
        require_positive("years", self.years)
