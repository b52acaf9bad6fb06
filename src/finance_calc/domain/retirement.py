from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from finance_calc.domain.money import (
    require_finite,
    require_non_negative,
    require_positive,
    require_return_rate,
    require_whole_periods,
)


# Share of the NPS corpus that must buy an annuity at retirement
NPS_ANNUITY_SHARE = Decimal("0.4")
DEFAULT_ANNUITY_RATE_PERCENT = Decimal("6")


# ==============================================================================
# SWP
# ==============================================================================


class CorpusState(str, Enum):
    ACCUMULATING = "accumulating"
    DEPLETED = "depleted"


@dataclass(frozen=True, slots=True)
class SWPTerms:
    corpus: Decimal
    monthly_withdrawal: Decimal
    annual_return_percent: Decimal
    years: int

    def validate(self) -> None:
        require_finite("corpus", self.corpus)
        require_finite("monthly_withdrawal", self.monthly_withdrawal)
        require_finite("annual_return_percent", self.annual_return_percent)
        require_positive("corpus", self.corpus)
        require_positive("monthly_withdrawal", self.monthly_withdrawal)
        require_return_rate("annual_return_percent", self.annual_return_percent)
        require_whole_periods("years", self.years)


@dataclass(frozen=True, slots=True)
class SWPResult:
    remaining_corpus: Decimal
    total_withdrawal: Decimal
    months_lasted: int
    state: CorpusState

    @property
    def depleted(self) -> bool:
        return self.state is CorpusState.DEPLETED


# ==============================================================================
# NPS
# ==============================================================================


@dataclass(frozen=True, slots=True)
class NPSTerms:
    monthly_contribution: Decimal
    annual_return_percent: Decimal
    years: int
    annuity_rate_percent: Decimal = DEFAULT_ANNUITY_RATE_PERCENT

    def validate(self) -> None:
        require_finite("monthly_contribution", self.monthly_contribution)
        require_finite("annual_return_percent", self.annual_return_percent)
        require_finite("annuity_rate_percent", self.annuity_rate_percent)
        require_positive("monthly_contribution", self.monthly_contribution)
        require_return_rate("annual_return_percent", self.annual_return_percent)
        require_whole_periods("years", self.years)
        require_non_negative("annuity_rate_percent", self.annuity_rate_percent)


@dataclass(frozen=True, slots=True)
class NPSResult:
    retirement_corpus: Decimal
    total_contribution: Decimal
    wealth_gained: Decimal
    monthly_pension: Decimal
