from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from finance_calc.domain.investment import SIPResult, SIPTerms, StepUpSIPTerms
from finance_calc.domain.money import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ONE,
    ZERO,
    monthly_rate,
    overflow_guard,
    round_currency,
    to_decimal,
)


def sip_maturity_value(
    monthly_investment: Decimal, annual_return_percent: Decimal, months: int
) -> Decimal:
    """
    Full precision future value of an annuity-due.

    M = P * ((1+i)^n - 1) / i * (1+i), or P * n when i is zero.
    """
    rate = monthly_rate(annual_return_percent)
    if rate == 0:
        return monthly_investment * months

    growth = ONE + rate
    return monthly_investment * ((growth**months - ONE) / rate) * growth


@dataclass(frozen=True, slots=True)
class CalculateSIP:
    """
    Maturity of a fixed monthly investment.

    total_investment is monthly_investment * months in exact Decimal
    arithmetic and is not rounded (100.01 a month for a year is 1200.12);
    maturity_value and wealth_gained are rounded to whole units.
    """

    def execute(self, terms: SIPTerms) -> SIPResult:
        terms.validate()

        months = terms.years * MONTHS_PER_YEAR
        with overflow_guard("sip"):
            maturity_value = sip_maturity_value(
                terms.monthly_investment, terms.annual_return_percent, months
            )
            total_investment = terms.monthly_investment * months

            return SIPResult(
                maturity_value=round_currency(maturity_value),
                total_investment=total_investment,
                wealth_gained=round_currency(maturity_value - total_investment),
            )


@dataclass(frozen=True, slots=True)
class CalculateStepUpSIP:
    """
    SIP whose monthly investment rises by a fixed percentage every year.

    Built from one-year CalculateSIP runs:
    - the corpus built so far compounds by the full annual return
    - the year's (rounded) one-year SIP maturity is added on top
    - the monthly investment steps up before the next year starts

    Stepped-up contributions are fractional, so the summed total_investment
    is rounded to whole units once, like the other outputs.
    """

    calculate_sip: CalculateSIP = field(default_factory=CalculateSIP)

    def execute(self, terms: StepUpSIPTerms) -> SIPResult:
        terms.validate()

        annual_growth = ONE + terms.annual_return_percent / HUNDRED
        step_up = ONE + terms.step_up_percent / HUNDRED

        current_investment = terms.initial_monthly_investment
        corpus = ZERO
        total_investment = ZERO

        with overflow_guard("step_up_sip"):
            for _ in range(terms.years):
                year = self.calculate_sip.execute(
                    SIPTerms(
                        monthly_investment=current_investment,
                        annual_return_percent=terms.annual_return_percent,
                        years=1,
                    )
                )
                corpus = corpus * annual_growth + year.maturity_value
                total_investment += year.total_investment
                current_investment *= step_up

            return SIPResult(
                maturity_value=round_currency(corpus),
                total_investment=round_currency(total_investment),
                wealth_gained=round_currency(corpus - total_investment),
            )


def calculate_sip(
    monthly_investment: Decimal | int | str,
    annual_return_percent: Decimal | int | str,
    years: int,
) -> SIPResult:
    terms = SIPTerms(
        monthly_investment=to_decimal("monthly_investment", monthly_investment),
        annual_return_percent=to_decimal("annual_return_percent", annual_return_percent),
        years=years,
    )
    return CalculateSIP().execute(terms)


def calculate_step_up_sip(
    initial_monthly_investment: Decimal | int | str,
    annual_return_percent: Decimal | int | str,
    years: int,
    step_up_percent: Decimal | int | str,
) -> SIPResult:
    terms = StepUpSIPTerms(
        initial_monthly_investment=to_decimal(
            "initial_monthly_investment", initial_monthly_investment
        ),
        annual_return_percent=to_decimal("annual_return_percent", annual_return_percent),
        years=years,
        step_up_percent=to_decimal("step_up_percent", step_up_percent),
    )
    return CalculateStepUpSIP().execute(terms)
