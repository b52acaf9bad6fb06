from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Monetary amounts: non-negative, up to 2 decimal places
MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
# Percentages: may be negative (market returns), up to 4 decimal places
PERCENT_PATTERN = r"^-?\d+(\.\d{1,4})?$"
# Year counts that may be fractional (lumpsum, CAGR)
YEARS_PATTERN = r"^\d+(\.\d{1,4})?$"


def _money(description: str, example: str) -> Any:
    return Field(
        description=f"{description} as decimal string",
        examples=[example],
        pattern=MONEY_PATTERN,
    )


def _percent(description: str, example: str) -> Any:
    return Field(
        description=f"{description} in percent, as decimal string (e.g. '10.5' = 10.5%)",
        examples=[example],
        pattern=PERCENT_PATTERN,
    )


# ==============================================================================
# EMI
# ==============================================================================


class EMIRequestDTO(BaseModel):
    """Request payload for calculating a loan EMI."""

    principal: str = _money("Loan amount", "100000")
    annual_rate_percent: str = _percent("Annual interest rate", "10")
    tenure_months: int = Field(description="Loan tenure in months", examples=[12], ge=1, le=480)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"principal": "100000", "annual_rate_percent": "10", "tenure_months": 12}
        }
    )


class EMIResponseDTO(BaseModel):
    """Monthly installment and loan totals, in whole currency units."""

    emi: str = Field(examples=["8792"])
    total_amount: str = Field(examples=["105499"])
    total_interest: str = Field(examples=["5499"])


class AmortizationScheduleRequestDTO(EMIRequestDTO):
    """Request payload for a month-by-month amortization schedule."""

    emi: str | None = Field(
        default=None,
        description="Installment paid each month. Defaults to the calculated EMI.",
        examples=["8792"],
        pattern=MONEY_PATTERN,
    )


class AmortizationEntryDTO(BaseModel):
    month: int
    emi: str
    principal: str
    interest: str
    balance: str


class AmortizationScheduleResponseDTO(BaseModel):
    emi: str = Field(description="Installment the schedule was built with")
    entries: list[AmortizationEntryDTO]


# ==============================================================================
# SIP
# ==============================================================================


class SIPRequestDTO(BaseModel):
    """Request payload for calculating SIP returns."""

    monthly_investment: str = _money("Monthly investment", "5000")
    annual_return_percent: str = _percent("Expected annual return", "12")
    years: int = Field(description="Investment period in years", examples=[10], ge=1, le=50)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"monthly_investment": "5000", "annual_return_percent": "12", "years": 10}
        }
    )


class StepUpSIPRequestDTO(BaseModel):
    """Request payload for a SIP whose investment rises every year."""

    initial_monthly_investment: str = _money("First year's monthly investment", "5000")
    annual_return_percent: str = _percent("Expected annual return", "12")
    years: int = Field(description="Investment period in years", examples=[10], ge=1, le=50)
    step_up_percent: str = _percent("Yearly increase of the monthly investment", "10")


class SIPResponseDTO(BaseModel):
    maturity_value: str = Field(examples=["1161695"])
    total_investment: str = Field(examples=["600000"])
    wealth_gained: str = Field(examples=["561695"])


# ==============================================================================
# FD / Lumpsum / CAGR
# ==============================================================================


class FDRequestDTO(BaseModel):
    """Request payload for fixed deposit maturity."""

    principal: str = _money("Deposit amount", "100000")
    annual_rate_percent: str = _percent("Annual interest rate", "7")
    tenure_months: int = Field(description="Deposit tenure in months", examples=[24], ge=1, le=120)
    compounding_frequency: int = Field(
        default=4,
        description="Compounding periods per year. Must be one of: 1, 2, 4, 12, 365",
        examples=[4],
    )


class FDResponseDTO(BaseModel):
    maturity_value: str = Field(examples=["114888"])
    interest_earned: str = Field(examples=["14888"])


class LumpsumRequestDTO(BaseModel):
    """Request payload for a one-time investment."""

    principal: str = _money("Amount invested", "100000")
    annual_return_percent: str = _percent("Expected annual return", "12")
    years: str = Field(
        description="Investment period in years (fractional allowed)",
        examples=["10"],
        pattern=YEARS_PATTERN,
    )


class LumpsumResponseDTO(BaseModel):
    maturity_value: str = Field(examples=["310585"])
    wealth_gained: str = Field(examples=["210585"])


class CAGRRequestDTO(BaseModel):
    """Request payload for compound annual growth rate."""

    initial_value: str = _money("Starting value", "100000")
    final_value: str = _money("Ending value", "310585")
    years: str = Field(
        description="Holding period in years (fractional allowed)",
        examples=["10"],
        pattern=YEARS_PATTERN,
    )


class CAGRResponseDTO(BaseModel):
    cagr_percent: str = Field(
        description="Annual growth rate in percent, rounded to 4 decimal places",
        examples=["12.0000"],
    )


# ==============================================================================
# SWP / NPS
# ==============================================================================


class SWPRequestDTO(BaseModel):
    """Request payload for a systematic withdrawal plan."""

    corpus: str = _money("Starting corpus", "1000000")
    monthly_withdrawal: str = _money("Amount withdrawn every month", "10000")
    annual_return_percent: str = _percent("Expected annual return", "8")
    years: int = Field(description="Withdrawal period in years", examples=[10], ge=1, le=50)


class SWPResponseDTO(BaseModel):
    remaining_corpus: str = Field(examples=["387545"])
    total_withdrawal: str = Field(examples=["1200000"])
    months_lasted: int = Field(examples=[120])
    depleted: bool = Field(
        description="True if the corpus ran out before the end of the period",
        examples=[False],
    )


class NPSRequestDTO(BaseModel):
    """Request payload for a National Pension Scheme projection."""

    monthly_contribution: str = _money("Monthly contribution", "5000")
    annual_return_percent: str = _percent("Expected annual return", "10")
    years: int = Field(description="Years until retirement", examples=[30], ge=1, le=50)
    annuity_rate_percent: str = Field(
        default="6",
        description="Annual annuity rate in percent applied to 40% of the corpus",
        examples=["6"],
        pattern=PERCENT_PATTERN,
    )


class NPSResponseDTO(BaseModel):
    retirement_corpus: str = Field(examples=["11396627"])
    total_contribution: str = Field(examples=["1800000"])
    wealth_gained: str = Field(examples=["9596627"])
    monthly_pension: str = Field(examples=["22793"])
