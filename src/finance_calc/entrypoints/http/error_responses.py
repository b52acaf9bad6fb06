"""Error body models used in the OpenAPI `responses=` of every route.

All handlers in exception_handlers.py answer with this shape:
`{"detail", "code", "errors"?}`.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected input field."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "principal",
                "message": "Must be less than or equal to 100000000",
                "code": "TOO_LARGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """
    Body of every 4xx/5xx response.

    `errors` is only present for validation failures; calculator range
    errors carry a single entry naming the offending field.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Scenario with identifier "
                    "'550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "emi result exceeds the representable range",
                    "code": "ARITHMETIC_OVERFLOW",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "principal",
                            "message": "Must be a valid decimal: abc",
                            "code": "INVALID_DECIMAL",
                        },
                        {
                            "field": "annual_rate_percent",
                            "message": "Must be less than or equal to 50",
                            "code": "TOO_LARGE",
                        },
                    ],
                },
            ]
        }
    )
