from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from finance_calc.domain.investment import SIPTerms
from finance_calc.domain.money import (
    MONTHLY_RATE_DIVISOR,
    overflow_guard,
    round_currency,
    to_decimal,
)
from finance_calc.domain.retirement import (
    DEFAULT_ANNUITY_RATE_PERCENT,
    NPS_ANNUITY_SHARE,
    NPSResult,
    NPSTerms,
)
from finance_calc.use_cases.calculate_sip import CalculateSIP


@dataclass(frozen=True, slots=True)
class CalculateNPS:
    """
    National Pension Scheme projection.

    The corpus grows exactly like a SIP of the monthly contribution. At
    retirement 40% of the (rounded) corpus buys an annuity paying
    annuity_rate_percent a year, reported as a monthly pension.
    """

    calculate_sip: CalculateSIP = field(default_factory=CalculateSIP)

    def execute(self, terms: NPSTerms) -> NPSResult:
        terms.validate()

        sip = self.calculate_sip.execute(
            SIPTerms(
                monthly_investment=terms.monthly_contribution,
                annual_return_percent=terms.annual_return_percent,
                years=terms.years,
            )
        )

        with overflow_guard("nps"):
            annuity_corpus = NPS_ANNUITY_SHARE * sip.maturity_value
            monthly_pension = annuity_corpus * terms.annuity_rate_percent / MONTHLY_RATE_DIVISOR

            return NPSResult(
                retirement_corpus=sip.maturity_value,
                total_contribution=sip.total_investment,
                wealth_gained=sip.wealth_gained,
                monthly_pension=round_currency(monthly_pension),
            )


def calculate_nps(
    monthly_contribution: Decimal | int | str,
    annual_return_percent: Decimal | int | str,
    years: int,
    annuity_rate_percent: Decimal | int | str = DEFAULT_ANNUITY_RATE_PERCENT,
) -> NPSResult:
    terms = NPSTerms(
        monthly_contribution=to_decimal("monthly_contribution", monthly_contribution),
        annual_return_percent=to_decimal("annual_return_percent", annual_return_percent),
        years=years,
        annuity_rate_percent=to_decimal("annuity_rate_percent", annuity_rate_percent),
    )
    return CalculateNPS().execute(terms)
