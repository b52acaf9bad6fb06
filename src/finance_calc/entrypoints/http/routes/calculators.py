from typing import Any

from fastapi import APIRouter, Depends

from finance_calc.entrypoints.http.dependencies import (
    get_amortization_schedule_use_case,
    get_calculate_cagr_use_case,
    get_calculate_emi_use_case,
    get_calculate_fd_use_case,
    get_calculate_lumpsum_use_case,
    get_calculate_nps_use_case,
    get_calculate_sip_use_case,
    get_calculate_step_up_sip_use_case,
    get_calculate_swp_use_case,
)
from finance_calc.entrypoints.http.dtos.calculators import (
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
from finance_calc.entrypoints.http.error_responses import ErrorResponse
from finance_calc.entrypoints.http.mappers.calculator_mapper import CalculatorMapper
from finance_calc.use_cases.calculate_emi import CalculateEMI, GenerateAmortizationSchedule
from finance_calc.use_cases.calculate_fd import CalculateFD
from finance_calc.use_cases.calculate_lumpsum import CalculateCAGR, CalculateLumpsum
from finance_calc.use_cases.calculate_nps import CalculateNPS
from finance_calc.use_cases.calculate_sip import CalculateSIP, CalculateStepUpSIP
from finance_calc.use_cases.calculate_swp import CalculateSWP


router = APIRouter(prefix="/calculators", tags=["Calculators"])

VALIDATION_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {
        "model": ErrorResponse,
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "detail": "principal must be > 0",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "principal",
                            "message": "principal must be > 0",
                            "code": "INVALID_VALUE",
                        }
                    ],
                }
            }
        },
    },
}


@router.post(
    "/emi",
    response_model=EMIResponseDTO,
    summary="Calculate loan EMI",
    description="""
    Calculate the equated monthly installment of a loan.

    ## Calculation
    - Monthly rate r = annual_rate_percent / 1200
    - EMI = P × r × (1+r)^n / ((1+r)^n − 1)
    - A 0% rate gives EMI = P / n
    - Total amount = EMI × n, total interest = total amount − P

    ## Rounding
    All outputs are whole currency units, rounded half away from zero.
    """,
    responses=VALIDATION_RESPONSES,
)
def calculate_emi(
    payload: EMIRequestDTO,
    use_case: CalculateEMI = Depends(get_calculate_emi_use_case),
) -> EMIResponseDTO:
    """Parse → execute → map → return."""
    terms = CalculatorMapper.to_loan_terms(payload)
    result = use_case.execute(terms)
    return CalculatorMapper.to_emi_response(result)


@router.post(
    "/emi/schedule",
    response_model=AmortizationScheduleResponseDTO,
    summary="Generate amortization schedule",
    description="""
    Month-by-month split of each installment into principal and interest.

    If `emi` is omitted, the schedule uses the (rounded) EMI of the loan.
    The balance never goes below zero.
    """,
    responses=VALIDATION_RESPONSES,
)
def generate_amortization_schedule(
    payload: AmortizationScheduleRequestDTO,
    calculate: CalculateEMI = Depends(get_calculate_emi_use_case),
    use_case: GenerateAmortizationSchedule = Depends(get_amortization_schedule_use_case),
) -> AmortizationScheduleResponseDTO:
    emi = CalculatorMapper.requested_emi(payload)
    if emi is None:
        emi = calculate.execute(CalculatorMapper.to_loan_terms(payload)).emi

    entries = use_case.execute(CalculatorMapper.to_schedule_terms(payload, emi))
    return CalculatorMapper.to_schedule_response(emi, entries)


@router.post(
    "/sip",
    response_model=SIPResponseDTO,
    summary="Calculate SIP returns",
    description="""
    Maturity value of a fixed monthly investment (contributions at the start of each month).

    M = P × ((1+i)^n − 1) / i × (1+i), with i = annual_return_percent / 1200 and n = years × 12.
    """,
    responses=VALIDATION_RESPONSES,
)
def calculate_sip(
    payload: SIPRequestDTO,
    use_case: CalculateSIP = Depends(get_calculate_sip_use_case),
) -> SIPResponseDTO:
    result = use_case.execute(CalculatorMapper.to_sip_terms(payload))
    return CalculatorMapper.to_sip_response(result)


@router.post(
    "/sip/step-up",
    response_model=SIPResponseDTO,
    summary="Calculate step-up SIP returns",
    description="SIP whose monthly investment rises by `step_up_percent` every year.",
    responses=VALIDATION_RESPONSES,
)
def calculate_step_up_sip(
    payload: StepUpSIPRequestDTO,
    use_case: CalculateStepUpSIP = Depends(get_calculate_step_up_sip_use_case),
) -> SIPResponseDTO:
    result = use_case.execute(CalculatorMapper.to_step_up_sip_terms(payload))
    return CalculatorMapper.to_sip_response(result)


@router.post(
    "/fd",
    response_model=FDResponseDTO,
    summary="Calculate fixed deposit maturity",
    description="""
    A = P × (1 + r/n)^(n × t), t = tenure_months / 12.

    `compounding_frequency` must be one of 1, 2, 4 (default), 12 or 365.
    """,
    responses=VALIDATION_RESPONSES,
)
def calculate_fd(
    payload: FDRequestDTO,
    use_case: CalculateFD = Depends(get_calculate_fd_use_case),
) -> FDResponseDTO:
    result = use_case.execute(CalculatorMapper.to_fd_terms(payload))
    return CalculatorMapper.to_fd_response(result)


@router.post(
    "/lumpsum",
    response_model=LumpsumResponseDTO,
    summary="Calculate lumpsum returns",
    description="A = P × (1 + r)^t, compounded annually.",
    responses=VALIDATION_RESPONSES,
)
def calculate_lumpsum(
    payload: LumpsumRequestDTO,
    use_case: CalculateLumpsum = Depends(get_calculate_lumpsum_use_case),
) -> LumpsumResponseDTO:
    result = use_case.execute(CalculatorMapper.to_lumpsum_terms(payload))
    return CalculatorMapper.to_lumpsum_response(result)


@router.post(
    "/cagr",
    response_model=CAGRResponseDTO,
    summary="Calculate CAGR",
    description="((final / initial)^(1/years) − 1) × 100. `initial_value` and `years` must be > 0.",
    responses=VALIDATION_RESPONSES,
)
def calculate_cagr(
    payload: CAGRRequestDTO,
    use_case: CalculateCAGR = Depends(get_calculate_cagr_use_case),
) -> CAGRResponseDTO:
    cagr_percent = use_case.execute(CalculatorMapper.to_cagr_terms(payload))
    return CalculatorMapper.to_cagr_response(cagr_percent)


@router.post(
    "/swp",
    response_model=SWPResponseDTO,
    summary="Calculate systematic withdrawal plan",
    description="""
    Each month the corpus earns its monthly return, then the withdrawal is taken.

    If the corpus runs out, `depleted` is true, `remaining_corpus` is 0 and
    `months_lasted` is the month it ran out in.
    """,
    responses=VALIDATION_RESPONSES,
)
def calculate_swp(
    payload: SWPRequestDTO,
    use_case: CalculateSWP = Depends(get_calculate_swp_use_case),
) -> SWPResponseDTO:
    result = use_case.execute(CalculatorMapper.to_swp_terms(payload))
    return CalculatorMapper.to_swp_response(result)


@router.post(
    "/nps",
    response_model=NPSResponseDTO,
    summary="Calculate NPS corpus and pension",
    description="""
    The corpus grows like a SIP of the monthly contribution. 40% of it buys an
    annuity at `annuity_rate_percent` (default 6%), paid out monthly.
    """,
    responses=VALIDATION_RESPONSES,
)
def calculate_nps(
    payload: NPSRequestDTO,
    use_case: CalculateNPS = Depends(get_calculate_nps_use_case),
) -> NPSResponseDTO:
    result = use_case.execute(CalculatorMapper.to_nps_terms(payload))
    return CalculatorMapper.to_nps_response(result)
