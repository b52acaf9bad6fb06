from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow

from finance_calc.domain.errors import ArithmeticOverflowError, InvalidCalculationInput

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = 12
# annual percent -> monthly fraction
MONTHLY_RATE_DIVISOR = Decimal("1200")

_WHOLE_UNIT = Decimal("1")


def round_currency(value: Decimal) -> Decimal:
    """
    Round a monetary amount to the nearest whole currency unit.

    Rounding policy:
    - ROUND_HALF_UP: ties go away from zero (2.5 -> 3, -2.5 -> -3)
    - Applied exactly once per output field, on the full precision value
    """
    return value.quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    return annual_rate_percent / MONTHLY_RATE_DIVISOR


@contextmanager
def overflow_guard(calculation: str) -> Iterator[None]:
    """
    Translate decimal range failures into an ArithmeticOverflowError.

    - Overflow: an exponent past Emax
    - InvalidOperation: quantizing a result with more integer digits than
      the context precision (10^28 and up at the default 28)

    round_currency calls must run inside the guard.
    """
    try:
        yield
    except (Overflow, InvalidOperation) as exc:
        raise ArithmeticOverflowError(
            f"{calculation} result exceeds the representable range",
            calculation=calculation,
        ) from exc


def to_decimal(name: str, value: Decimal | int | float | str) -> Decimal:
    """
    Convert a caller supplied scalar to Decimal.

    Floats go through their shortest repr so 0.1 becomes Decimal("0.1"),
    not the binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidCalculationInput(f"{name} must be a number", field=name)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidCalculationInput(f"{name} must be a valid decimal: {value}", field=name) from exc


# ==============================================================================
# Input guards shared by the value records
# ==============================================================================


def require_positive(name: str, value: Decimal) -> None:
    if value <= 0:
        raise InvalidCalculationInput(f"{name} must be > 0", field=name)


def require_non_negative(name: str, value: Decimal) -> None:
    if value < 0:
        raise InvalidCalculationInput(f"{name} must be >= 0", field=name)


def require_whole_periods(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCalculationInput(f"{name} must be a whole number", field=name)
    if value < 1:
        raise InvalidCalculationInput(f"{name} must be >= 1", field=name)


def require_return_rate(name: str, value: Decimal) -> None:
    """Returns below -100% would make the growth base non-positive."""
    if value <= -HUNDRED:
        raise InvalidCalculationInput(f"{name} must be > -100", field=name)


def require_finite(name: str, value: Decimal) -> None:
    if not isinstance(value, Decimal):
        raise InvalidCalculationInput(
            f"{name} must be Decimal (no floats past the boundary)", field=name
        )
    if not value.is_finite():
        raise InvalidCalculationInput(f"{name} must be a finite number", field=name)
