"""Run any calculator from a loosely typed input mapping.

Used wherever calculator inputs arrive as JSON (saved scenarios): inputs are
parsed field by field, every problem is reported at once, and the result is
returned in the same JSON-ready shape it is stored in.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any

from finance_calc.domain.errors import InvalidCalculationInput, ValidationError
from finance_calc.domain.limits import (
    MAX_AMOUNT,
    MAX_DEPOSIT_AMOUNT,
    MAX_FD_RATE_PERCENT,
    MAX_FD_TENURE_MONTHS,
    MAX_LOAN_AMOUNT,
    MAX_LOAN_RATE_PERCENT,
    MAX_LOAN_TENURE_MONTHS,
    MAX_MONTHLY_INVESTMENT,
    MAX_RETURN_PERCENT,
    MAX_YEARS,
    cap_exceeded,
)
from finance_calc.domain.money import to_decimal
from finance_calc.domain.scenario import CalculatorType
from finance_calc.use_cases.calculate_emi import calculate_emi
from finance_calc.use_cases.calculate_fd import calculate_fd
from finance_calc.use_cases.calculate_lumpsum import calculate_lumpsum
from finance_calc.use_cases.calculate_nps import calculate_nps
from finance_calc.use_cases.calculate_sip import calculate_sip
from finance_calc.use_cases.calculate_swp import calculate_swp


@dataclass(frozen=True, slots=True)
class InputField:
    name: str
    kind: type
    maximum: Decimal | None = None
    required: bool = True


def _money(name: str, maximum: Decimal | None, required: bool = True) -> InputField:
    return InputField(name=name, kind=Decimal, maximum=maximum, required=required)


def _periods(name: str, maximum: Decimal | None, required: bool = True) -> InputField:
    return InputField(name=name, kind=int, maximum=maximum, required=required)


# Same caps as the /v1/calculators endpoints
CALCULATOR_INPUTS: dict[CalculatorType, tuple[InputField, ...]] = {
    CalculatorType.EMI: (
        _money("principal", MAX_LOAN_AMOUNT),
        _money("annual_rate_percent", MAX_LOAN_RATE_PERCENT),
        _periods("tenure_months", MAX_LOAN_TENURE_MONTHS),
    ),
    CalculatorType.SIP: (
        _money("monthly_investment", MAX_MONTHLY_INVESTMENT),
        _money("annual_return_percent", MAX_RETURN_PERCENT),
        _periods("years", MAX_YEARS),
    ),
    CalculatorType.FD: (
        _money("principal", MAX_DEPOSIT_AMOUNT),
        _money("annual_rate_percent", MAX_FD_RATE_PERCENT),
        _periods("tenure_months", MAX_FD_TENURE_MONTHS),
        _periods("compounding_frequency", None, required=False),
    ),
    CalculatorType.LUMPSUM: (
        _money("principal", MAX_AMOUNT),
        _money("annual_return_percent", MAX_RETURN_PERCENT),
        _money("years", MAX_YEARS),
    ),
    CalculatorType.SWP: (
        _money("corpus", MAX_AMOUNT),
        _money("monthly_withdrawal", MAX_AMOUNT),
        _money("annual_return_percent", MAX_RETURN_PERCENT),
        _periods("years", MAX_YEARS),
    ),
    CalculatorType.NPS: (
        _money("monthly_contribution", MAX_MONTHLY_INVESTMENT),
        _money("annual_return_percent", MAX_RETURN_PERCENT),
        _periods("years", MAX_YEARS),
        _money("annuity_rate_percent", MAX_RETURN_PERCENT, required=False),
    ),
}

CALCULATORS: dict[CalculatorType, Callable[..., Any]] = {
    CalculatorType.EMI: calculate_emi,
    CalculatorType.SIP: calculate_sip,
    CalculatorType.FD: calculate_fd,
    CalculatorType.LUMPSUM: calculate_lumpsum,
    CalculatorType.SWP: calculate_swp,
    CalculatorType.NPS: calculate_nps,
}


@dataclass(frozen=True, slots=True)
class CalculatorRun:
    inputs: dict[str, Any]
    results: dict[str, Any]


def to_json_ready(value: Any) -> Any:
    """Decimal -> str, Enum -> value, result dataclass -> dict."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: to_json_ready(item) for key, item in value.items()}
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: to_json_ready(getattr(value, f.name)) for f in fields(value)}
    return value


class RunCalculator:
    """
    Parse a raw input mapping and execute the matching calculator.

    Raises:
        ValidationError: If fields are missing, unknown, malformed or above
            their cap (all field errors are collected into one error)
        InvalidCalculationInput: If the parsed values are out of range
    """

    def execute(self, calculator_type: CalculatorType, inputs: Mapping[str, Any]) -> CalculatorRun:
        parsed = self._parse(CALCULATOR_INPUTS[calculator_type], inputs)
        result = CALCULATORS[calculator_type](**parsed)

        return CalculatorRun(inputs=to_json_ready(parsed), results=to_json_ready(result))

    @staticmethod
    def _parse(spec: tuple[InputField, ...], inputs: Mapping[str, Any]) -> dict[str, Any]:
        errors: list[dict[str, str]] = []
        parsed: dict[str, Any] = {}

        known = {field.name for field in spec}
        for name in sorted(set(inputs) - known):
            errors.append({"field": name, "message": "Unknown input", "code": "UNKNOWN_FIELD"})

        for field in spec:
            if inputs.get(field.name) is None:
                if field.required:
                    errors.append(
                        {"field": field.name, "message": "Field required", "code": "REQUIRED"}
                    )
                continue

            raw = inputs[field.name]
            value: int | Decimal | None
            if field.kind is int:
                value = _parse_int(raw)
                if value is None:
                    errors.append(
                        {
                            "field": field.name,
                            "message": f"Must be a whole number: {raw}",
                            "code": "INVALID_INTEGER",
                        }
                    )
                    continue
            else:
                value = _parse_decimal(field.name, raw)
                if value is None:
                    errors.append(
                        {
                            "field": field.name,
                            "message": f"Must be a valid decimal: {raw}",
                            "code": "INVALID_DECIMAL",
                        }
                    )
                    continue

            if field.maximum is not None and value > field.maximum:
                errors.append(cap_exceeded(field.name, field.maximum))
            parsed[field.name] = value

        if errors:
            raise ValidationError(errors=errors)

        return parsed


def _parse_decimal(name: str, raw: Any) -> Decimal | None:
    try:
        value = to_decimal(name, raw)
    except InvalidCalculationInput:
        return None
    # NaN and Infinity parse but cannot be compared against a cap
    return value if value.is_finite() else None


def _parse_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw)
    return None
