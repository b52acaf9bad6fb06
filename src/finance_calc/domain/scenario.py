from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from finance_calc.domain.errors import ValidationError

MAX_NAME_LENGTH = 100
MAX_NOTES_LENGTH = 500


class CalculatorType(str, Enum):
    EMI = "emi"
    SIP = "sip"
    FD = "fd"
    LUMPSUM = "lumpsum"
    SWP = "swp"
    NPS = "nps"


@dataclass(frozen=True, slots=True)
class SavedScenario:
    """
    A named calculator run kept for later comparison.

    inputs and results are JSON-serializable mappings: monetary values are
    decimal strings, period counts are ints.
    """

    id: str
    name: str
    type: CalculatorType
    inputs: dict[str, Any]
    results: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    notes: str | None = None


def validate_scenario_text(name: str, notes: str | None) -> None:
    errors = []
    if not name or not name.strip():
        errors.append({"field": "name", "message": "Must not be blank", "code": "REQUIRED"})
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(
            {
                "field": "name",
                "message": f"Must be at most {MAX_NAME_LENGTH} characters",
                "code": "TOO_LONG",
            }
        )
    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        errors.append(
            {
                "field": "notes",
                "message": f"Must be at most {MAX_NOTES_LENGTH} characters",
                "code": "TOO_LONG",
            }
        )
    if errors:
        raise ValidationError(errors=errors)
