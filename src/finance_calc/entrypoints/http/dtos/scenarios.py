from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from finance_calc.domain.scenario import CalculatorType


class ScenarioCreateDTO(BaseModel):
    """Request payload for saving a calculator scenario.

    Only inputs are submitted; results are computed server-side.
    """

    name: str = Field(description="Display name", examples=["Home loan - SBI"], min_length=1)
    type: CalculatorType = Field(description="Calculator the inputs belong to", examples=["emi"])
    inputs: dict[str, Any] = Field(
        description="Calculator inputs; monetary values as decimal strings",
        examples=[{"principal": "2500000", "annual_rate_percent": "8.5", "tenure_months": 240}],
    )
    notes: str | None = Field(default=None, description="Free-form notes")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Home loan - SBI",
                "type": "emi",
                "inputs": {
                    "principal": "2500000",
                    "annual_rate_percent": "8.5",
                    "tenure_months": 240,
                },
                "notes": "Floating rate, reset yearly",
            }
        }
    )


class ScenarioUpdateDTO(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    name: str | None = Field(default=None, min_length=1)
    inputs: dict[str, Any] | None = None
    notes: str | None = None


class ScenarioResponseDTO(BaseModel):
    id: str
    name: str
    type: CalculatorType
    inputs: dict[str, Any]
    results: dict[str, Any]
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class ScenarioListResponseDTO(BaseModel):
    scenarios: list[ScenarioResponseDTO]
    total: int
