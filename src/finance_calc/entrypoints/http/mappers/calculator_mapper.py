from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from finance_calc.domain.errors import ValidationError
from finance_calc.domain.investment import (
    CAGRTerms,
    FDResult,
    FDTerms,
    LumpsumResult,
    LumpsumTerms,
    SIPResult,
    SIPTerms,
    StepUpSIPTerms,
)
from finance_calc.domain.limits import (
    MAX_AMOUNT,
    MAX_DEPOSIT_AMOUNT,
    MAX_FD_RATE_PERCENT,
    MAX_LOAN_AMOUNT,
    MAX_LOAN_RATE_PERCENT,
    MAX_MONTHLY_INVESTMENT,
    MAX_RETURN_PERCENT,
    MAX_YEARS,
    cap_exceeded,
)
from finance_calc.domain.loan import AmortizationEntry, EMIResult, LoanTerms, ScheduleTerms
from finance_calc.domain.money import overflow_guard
from finance_calc.domain.retirement import NPSResult, NPSTerms, SWPResult, SWPTerms
from finance_calc.entrypoints.http.dtos.calculators import (
    AmortizationEntryDTO,
    AmortizationScheduleRequestDTO,
    AmortizationScheduleResponseDTO,
    CAGRRequestDTO,
    CAGRResponseDTO,
    EMIRequestDTO,
    EMIResponseDTO,
    FDRequestDTO,
    FDResponseDTO,
    LumpsumRequestDTO,
    LumpsumResponseDTO,
    NPSRequestDTO,
    NPSResponseDTO,
    SIPRequestDTO,
    SIPResponseDTO,
    StepUpSIPRequestDTO,
    SWPRequestDTO,
    SWPResponseDTO,
)

CAGR_DISPLAY_PLACES = Decimal("0.0001")


class _FieldParser:
    """Collects every string -> Decimal conversion error of one request."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def decimal(self, field: str, raw: str, maximum: Decimal | None = None) -> Decimal:
        try:
            value = Decimal(raw)
        except (InvalidOperation, ValueError):
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            )
            return Decimal("0")  # Placeholder to continue validation

        if maximum is not None and value > maximum:
            self.errors.append(cap_exceeded(field, maximum))
        return value

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(errors=self.errors)


class CalculatorMapper:
    """
    Maps between REST DTOs and calculator domain records.

    Handles string <-> Decimal conversion at the boundary and enforces the
    form-level input caps. Range rules (positivity, allowed frequencies)
    stay in the domain records.
    """

    # ------------------------------------------------------------------ EMI

    @staticmethod
    def to_loan_terms(dto: EMIRequestDTO) -> LoanTerms:
        parser = _FieldParser()
        principal = parser.decimal("principal", dto.principal, MAX_LOAN_AMOUNT)
        rate = parser.decimal("annual_rate_percent", dto.annual_rate_percent, MAX_LOAN_RATE_PERCENT)
        parser.raise_if_invalid()

        return LoanTerms(
            principal=principal,
            annual_rate_percent=rate,
            tenure_months=dto.tenure_months,
        )

    @staticmethod
    def to_schedule_terms(dto: AmortizationScheduleRequestDTO, emi: Decimal) -> ScheduleTerms:
        """Pair the loan with the installment the schedule is built from."""
        return ScheduleTerms(loan=CalculatorMapper.to_loan_terms(dto), emi=emi)

    @staticmethod
    def requested_emi(dto: AmortizationScheduleRequestDTO) -> Decimal | None:
        if dto.emi is None:
            return None
        parser = _FieldParser()
        emi = parser.decimal("emi", dto.emi, MAX_LOAN_AMOUNT)
        parser.raise_if_invalid()
        return emi

    @staticmethod
    def to_emi_response(result: EMIResult) -> EMIResponseDTO:
        return EMIResponseDTO(
            emi=str(result.emi),
            total_amount=str(result.total_amount),
            total_interest=str(result.total_interest),
        )

    @staticmethod
    def to_schedule_response(
        emi: Decimal, entries: list[AmortizationEntry]
    ) -> AmortizationScheduleResponseDTO:
        return AmortizationScheduleResponseDTO(
            emi=str(emi),
            entries=[
                AmortizationEntryDTO(
                    month=entry.month,
                    emi=str(entry.emi),
                    principal=str(entry.principal),
                    interest=str(entry.interest),
                    balance=str(entry.balance),
                )
                for entry in entries
            ],
        )

    # ------------------------------------------------------------------ SIP

    @staticmethod
    def to_sip_terms(dto: SIPRequestDTO) -> SIPTerms:
        parser = _FieldParser()
        investment = parser.decimal(
            "monthly_investment", dto.monthly_investment, MAX_MONTHLY_INVESTMENT
        )
        rate = parser.decimal("annual_return_percent", dto.annual_return_percent, MAX_RETURN_PERCENT)
        parser.raise_if_invalid()

        return SIPTerms(monthly_investment=investment, annual_return_percent=rate, years=dto.years)

    @staticmethod
    def to_step_up_sip_terms(dto: StepUpSIPRequestDTO) -> StepUpSIPTerms:
        parser = _FieldParser()
        investment = parser.decimal(
            "initial_monthly_investment", dto.initial_monthly_investment, MAX_MONTHLY_INVESTMENT
        )
        rate = parser.decimal("annual_return_percent", dto.annual_return_percent, MAX_RETURN_PERCENT)
        step_up = parser.decimal("step_up_percent", dto.step_up_percent, MAX_RETURN_PERCENT)
        parser.raise_if_invalid()

        return StepUpSIPTerms(
            initial_monthly_investment=investment,
            annual_return_percent=rate,
            years=dto.years,
            step_up_percent=step_up,
        )

    @staticmethod
    def to_sip_response(result: SIPResult) -> SIPResponseDTO:
        return SIPResponseDTO(
            maturity_value=str(result.maturity_value),
            total_investment=str(result.total_investment),
            wealth_gained=str(result.wealth_gained),
        )

    # ------------------------------------------------------------------ FD / Lumpsum / CAGR

    @staticmethod
    def to_fd_terms(dto: FDRequestDTO) -> FDTerms:
        parser = _FieldParser()
        principal = parser.decimal("principal", dto.principal, MAX_DEPOSIT_AMOUNT)
        rate = parser.decimal("annual_rate_percent", dto.annual_rate_percent, MAX_FD_RATE_PERCENT)
        parser.raise_if_invalid()

        return FDTerms(
            principal=principal,
            annual_rate_percent=rate,
            tenure_months=dto.tenure_months,
            compounding_frequency=dto.compounding_frequency,
        )

    @staticmethod
    def to_fd_response(result: FDResult) -> FDResponseDTO:
        return FDResponseDTO(
            maturity_value=str(result.maturity_value),
            interest_earned=str(result.interest_earned),
        )

    @staticmethod
    def to_lumpsum_terms(dto: LumpsumRequestDTO) -> LumpsumTerms:
        parser = _FieldParser()
        principal = parser.decimal("principal", dto.principal, MAX_AMOUNT)
        rate = parser.decimal("annual_return_percent", dto.annual_return_percent, MAX_RETURN_PERCENT)
        years = parser.decimal("years", dto.years, MAX_YEARS)
        parser.raise_if_invalid()

        return LumpsumTerms(principal=principal, annual_return_percent=rate, years=years)

    @staticmethod
    def to_lumpsum_response(result: LumpsumResult) -> LumpsumResponseDTO:
        return LumpsumResponseDTO(
            maturity_value=str(result.maturity_value),
            wealth_gained=str(result.wealth_gained),
        )

    @staticmethod
    def to_cagr_terms(dto: CAGRRequestDTO) -> CAGRTerms:
        parser = _FieldParser()
        initial = parser.decimal("initial_value", dto.initial_value, MAX_AMOUNT)
        final = parser.decimal("final_value", dto.final_value, MAX_AMOUNT)
        years = parser.decimal("years", dto.years, MAX_YEARS)
        parser.raise_if_invalid()

        return CAGRTerms(initial_value=initial, final_value=final, years=years)

    @staticmethod
    def to_cagr_response(cagr_percent: Decimal) -> CAGRResponseDTO:
        with overflow_guard("cagr"):
            rounded = cagr_percent.quantize(CAGR_DISPLAY_PLACES, rounding=ROUND_HALF_UP)
        return CAGRResponseDTO(cagr_percent=str(rounded))

    # ------------------------------------------------------------------ SWP / NPS

    @staticmethod
    def to_swp_terms(dto: SWPRequestDTO) -> SWPTerms:
        parser = _FieldParser()
        corpus = parser.decimal("corpus", dto.corpus, MAX_AMOUNT)
        withdrawal = parser.decimal("monthly_withdrawal", dto.monthly_withdrawal, MAX_AMOUNT)
        rate = parser.decimal("annual_return_percent", dto.annual_return_percent, MAX_RETURN_PERCENT)
        parser.raise_if_invalid()

        return SWPTerms(
            corpus=corpus,
            monthly_withdrawal=withdrawal,
            annual_return_percent=rate,
            years=dto.years,
        )

    @staticmethod
    def to_swp_response(result: SWPResult) -> SWPResponseDTO:
        return SWPResponseDTO(
            remaining_corpus=str(result.remaining_corpus),
            total_withdrawal=str(result.total_withdrawal),
            months_lasted=result.months_lasted,
            depleted=result.depleted,
        )

    @staticmethod
    def to_nps_terms(dto: NPSRequestDTO) -> NPSTerms:
        parser = _FieldParser()
        contribution = parser.decimal(
            "monthly_contribution", dto.monthly_contribution, MAX_MONTHLY_INVESTMENT
        )
        rate = parser.decimal("annual_return_percent", dto.annual_return_percent, MAX_RETURN_PERCENT)
        annuity_rate = parser.decimal(
            "annuity_rate_percent", dto.annuity_rate_percent, MAX_RETURN_PERCENT
        )
        parser.raise_if_invalid()

        return NPSTerms(
            monthly_contribution=contribution,
            annual_return_percent=rate,
            years=dto.years,
            annuity_rate_percent=annuity_rate,
        )

    @staticmethod
    def to_nps_response(result: NPSResult) -> NPSResponseDTO:
        return NPSResponseDTO(
            retirement_corpus=str(result.retirement_corpus),
            total_contribution=str(result.total_contribution),
            wealth_gained=str(result.wealth_gained),
            monthly_pension=str(result.monthly_pension),
        )
