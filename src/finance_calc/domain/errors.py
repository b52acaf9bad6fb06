"""Domain error classes.

Protocol-agnostic errors that represent calculation and storage failures.
These errors are translated to appropriate formats (HTTP today) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be
    translated to HTTP (or any other transport) formats.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input validation error.

    Used for invalid calculator inputs and malformed scenario payloads.

    Examples:
        - principal <= 0
        - tenure_months < 1
        - compounding frequency outside {1, 2, 4, 12, 365}

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "principal", "message": "Must be positive"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidCalculationInput(ValidationError):
    """A calculator received an input outside its domain.

    Raised eagerly by every calculator before any arithmetic runs, so
    callers never see NaN or Infinity results.
    """


class ArithmeticOverflowError(DomainError):
    """A calculation exceeded the representable numeric range.

    Only reachable with absurd principal/tenure combinations; the HTTP
    layer caps inputs well below this.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "ARITHMETIC_OVERFLOW"


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Saved scenario with ID not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Scenario")
            identifier: Resource identifier (e.g., UUID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
