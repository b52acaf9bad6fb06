from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from finance_calc.domain.money import (
    MONTHS_PER_YEAR,
    ONE,
    ZERO,
    monthly_rate,
    overflow_guard,
    round_currency,
    to_decimal,
)
from finance_calc.domain.retirement import CorpusState, SWPResult, SWPTerms


@dataclass(frozen=True, slots=True)
class CalculateSWP:
    """
    Systematic withdrawal from an invested corpus.

    Each month the corpus first earns its monthly return, then the withdrawal
    is taken out. The simulation is a two-state machine bounded by
    years * 12 months:

    - ACCUMULATING: the corpus is still positive after the withdrawal
    - DEPLETED (terminal): the corpus hit zero or below; it is clamped to
      zero and no further months are simulated

    total_withdrawal counts the full withdrawal for every month lasted,
    including the month the corpus ran out.
    """

    def execute(self, terms: SWPTerms) -> SWPResult:
        terms.validate()

        growth = ONE + monthly_rate(terms.annual_return_percent)
        total_months = terms.years * MONTHS_PER_YEAR

        corpus = terms.corpus
        state = CorpusState.ACCUMULATING
        months_lasted = 0

        with overflow_guard("swp"):
            while state is CorpusState.ACCUMULATING and months_lasted < total_months:
                months_lasted += 1
                corpus = corpus * growth - terms.monthly_withdrawal
                if corpus <= 0:
                    corpus = ZERO
                    state = CorpusState.DEPLETED

            total_withdrawal = terms.monthly_withdrawal * months_lasted

            return SWPResult(
                remaining_corpus=round_currency(corpus),
                total_withdrawal=round_currency(total_withdrawal),
                months_lasted=months_lasted,
                state=state,
            )


def calculate_swp(
    corpus: Decimal | int | str,
    monthly_withdrawal: Decimal | int | str,
    annual_return_percent: Decimal | int | str,
    years: int,
) -> SWPResult:
    terms = SWPTerms(
        corpus=to_decimal("corpus", corpus),
        monthly_withdrawal=to_decimal("monthly_withdrawal", monthly_withdrawal),
        annual_return_percent=to_decimal("annual_return_percent", annual_return_percent),
        years=years,
    )
    return CalculateSWP().execute(terms)
