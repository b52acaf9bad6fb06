"""
Unit tests for CalculatorMapper.

Tests verify:
- Decimal strings are parsed into domain records exactly
- Form-level caps are enforced, with every violation reported at once
- Results are rendered back as strings
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from finance_calc.domain.errors import ArithmeticOverflowError, ValidationError
from finance_calc.domain.investment import FDResult, FDTerms, SIPResult
from finance_calc.domain.loan import AmortizationEntry, EMIResult, LoanTerms
from finance_calc.domain.retirement import CorpusState, NPSResult, SWPResult
from finance_calc.entrypoints.http.dtos.calculators import (
    AmortizationScheduleRequestDTO,
    CAGRRequestDTO,
    EMIRequestDTO,
    FDRequestDTO,
    LumpsumRequestDTO,
    NPSRequestDTO,
    StepUpSIPRequestDTO,
    SWPRequestDTO,
)
from finance_calc.entrypoints.http.mappers.calculator_mapper import CalculatorMapper


# ==============================================================================
# Request DTO → Domain
# ==============================================================================


def test_to_loan_terms_parses_exact_decimals() -> None:
    dto = EMIRequestDTO(principal="2500000.50", annual_rate_percent="8.35", tenure_months=240)

    assert CalculatorMapper.to_loan_terms(dto) == LoanTerms(
        principal=Decimal("2500000.50"),
        annual_rate_percent=Decimal("8.35"),
        tenure_months=240,
    )


def test_to_loan_terms_collects_all_cap_violations() -> None:
    dto = EMIRequestDTO(principal="100000001", annual_rate_percent="51", tenure_months=12)

    with pytest.raises(ValidationError) as exc_info:
        CalculatorMapper.to_loan_terms(dto)

    assert exc_info.value.errors == [
        {
            "field": "principal",
            "message": "Must be less than or equal to 100000000",
            "code": "TOO_LARGE",
        },
        {
            "field": "annual_rate_percent",
            "message": "Must be less than or equal to 50",
            "code": "TOO_LARGE",
        },
    ]


def test_caps_are_inclusive() -> None:
    dto = EMIRequestDTO(principal="100000000", annual_rate_percent="50", tenure_months=12)

    assert CalculatorMapper.to_loan_terms(dto).principal == Decimal("100000000")


def test_requested_emi_absent() -> None:
    dto = AmortizationScheduleRequestDTO(
        principal="100000", annual_rate_percent="10", tenure_months=12
    )

    assert CalculatorMapper.requested_emi(dto) is None


def test_to_schedule_terms_pairs_loan_and_emi() -> None:
    dto = AmortizationScheduleRequestDTO(
        principal="100000", annual_rate_percent="10", tenure_months=12, emi="9000"
    )

    emi = CalculatorMapper.requested_emi(dto)
    assert emi == Decimal("9000")

    terms = CalculatorMapper.to_schedule_terms(dto, emi)
    assert terms.emi == Decimal("9000")
    assert terms.loan.principal == Decimal("100000")


def test_to_step_up_sip_terms_caps_step_up() -> None:
    dto = StepUpSIPRequestDTO(
        initial_monthly_investment="5000",
        annual_return_percent="12",
        years=10,
        step_up_percent="75",
    )

    with pytest.raises(ValidationError) as exc_info:
        CalculatorMapper.to_step_up_sip_terms(dto)

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["field"] == "step_up_percent"


def test_to_fd_terms_uses_fd_rate_cap() -> None:
    dto = FDRequestDTO(principal="100000", annual_rate_percent="21", tenure_months=12)

    with pytest.raises(ValidationError) as exc_info:
        CalculatorMapper.to_fd_terms(dto)

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["message"] == "Must be less than or equal to 20"


def test_to_fd_terms_keeps_frequency() -> None:
    dto = FDRequestDTO(
        principal="100000", annual_rate_percent="7", tenure_months=24, compounding_frequency=12
    )

    assert CalculatorMapper.to_fd_terms(dto) == FDTerms(
        principal=Decimal("100000"),
        annual_rate_percent=Decimal("7"),
        tenure_months=24,
        compounding_frequency=12,
    )


def test_to_lumpsum_terms_parses_fractional_years() -> None:
    dto = LumpsumRequestDTO(principal="100000", annual_return_percent="12", years="2.5")

    assert CalculatorMapper.to_lumpsum_terms(dto).years == Decimal("2.5")


def test_to_cagr_terms_caps_years() -> None:
    dto = CAGRRequestDTO(initial_value="100", final_value="200", years="51")

    with pytest.raises(ValidationError) as exc_info:
        CalculatorMapper.to_cagr_terms(dto)

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["field"] == "years"


def test_to_swp_terms() -> None:
    dto = SWPRequestDTO(
        corpus="1000000", monthly_withdrawal="10000", annual_return_percent="8", years=10
    )

    terms = CalculatorMapper.to_swp_terms(dto)

    assert terms.corpus == Decimal("1000000")
    assert terms.monthly_withdrawal == Decimal("10000")


def test_to_nps_terms_defaults_annuity_rate() -> None:
    dto = NPSRequestDTO(monthly_contribution="5000", annual_return_percent="10", years=30)

    assert CalculatorMapper.to_nps_terms(dto).annuity_rate_percent == Decimal("6")


# ==============================================================================
# Domain → Response DTO
# ==============================================================================


def test_to_emi_response() -> None:
    dto = CalculatorMapper.to_emi_response(
        EMIResult(
            emi=Decimal("8792"),
            total_amount=Decimal("105499"),
            total_interest=Decimal("5499"),
        )
    )

    assert dto.model_dump() == {"emi": "8792", "total_amount": "105499", "total_interest": "5499"}


def test_to_schedule_response() -> None:
    entry = AmortizationEntry(
        month=1,
        emi=Decimal("8792"),
        principal=Decimal("7959"),
        interest=Decimal("833"),
        balance=Decimal("92041"),
    )

    dto = CalculatorMapper.to_schedule_response(Decimal("8792"), [entry])

    assert dto.emi == "8792"
    assert dto.entries[0].model_dump() == {
        "month": 1,
        "emi": "8792",
        "principal": "7959",
        "interest": "833",
        "balance": "92041",
    }


def test_to_sip_response() -> None:
    dto = CalculatorMapper.to_sip_response(
        SIPResult(
            maturity_value=Decimal("1161695"),
            total_investment=Decimal("600000"),
            wealth_gained=Decimal("561695"),
        )
    )

    assert dto.wealth_gained == "561695"


def test_to_fd_response() -> None:
    dto = CalculatorMapper.to_fd_response(
        FDResult(maturity_value=Decimal("114888"), interest_earned=Decimal("14888"))
    )

    assert dto.interest_earned == "14888"


@pytest.mark.parametrize(
    ("cagr", "expected"),
    [
        (Decimal("12.00000646"), "12.0000"),
        (Decimal("7.123456"), "7.1235"),
        (Decimal("-100"), "-100.0000"),
    ],
)
def test_to_cagr_response_rounds_to_four_places(cagr: Decimal, expected: str) -> None:
    assert CalculatorMapper.to_cagr_response(cagr).cagr_percent == expected


def test_to_cagr_response_too_large_to_display_is_overflow() -> None:
    with pytest.raises(ArithmeticOverflowError):
        CalculatorMapper.to_cagr_response(Decimal("1E+30"))


def test_to_swp_response_exposes_depleted_flag() -> None:
    dto = CalculatorMapper.to_swp_response(
        SWPResult(
            remaining_corpus=Decimal("0"),
            total_withdrawal=Decimal("120000"),
            months_lasted=4,
            state=CorpusState.DEPLETED,
        )
    )

    assert dto.depleted is True
    assert dto.months_lasted == 4


def test_to_nps_response() -> None:
    dto = CalculatorMapper.to_nps_response(
        NPSResult(
            retirement_corpus=Decimal("120000"),
            total_contribution=Decimal("120000"),
            wealth_gained=Decimal("0"),
            monthly_pension=Decimal("240"),
        )
    )

    assert dto.monthly_pension == "240"
