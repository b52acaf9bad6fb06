"""Input caps of the calculator forms.

Enforced at both entry points, the calculator endpoints and saved scenario
inputs, so a scenario accepts exactly what its calculator accepts. Period
caps repeat the `le=` bounds on the request DTOs.
"""

from decimal import Decimal

MAX_LOAN_AMOUNT = Decimal("100000000")
MAX_LOAN_RATE_PERCENT = Decimal("50")
MAX_LOAN_TENURE_MONTHS = Decimal("480")

MAX_MONTHLY_INVESTMENT = Decimal("1000000")
MAX_RETURN_PERCENT = Decimal("50")
MAX_AMOUNT = Decimal("100000000")
MAX_YEARS = Decimal("50")

MAX_DEPOSIT_AMOUNT = Decimal("100000000")
MAX_FD_RATE_PERCENT = Decimal("20")
MAX_FD_TENURE_MONTHS = Decimal("120")


def cap_exceeded(field: str, maximum: Decimal) -> dict[str, str]:
    """Field error reported for a value above its cap."""
    return {
        "field": field,
        "message": f"Must be less than or equal to {maximum}",
        "code": "TOO_LARGE",
    }
