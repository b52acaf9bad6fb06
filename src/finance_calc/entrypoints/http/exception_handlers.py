"""FastAPI exception handlers for domain errors.

Every failure leaves the API as `{"detail", "code", "errors"?}`:
- VALIDATION_ERROR → 422 (field errors listed in `errors`)
- ARITHMETIC_OVERFLOW → 422
- NOT_FOUND → 404
- INTERNAL_ERROR and anything unexpected → 500
- any other domain error → 400
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from finance_calc.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "ARITHMETIC_OVERFLOW": 422,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_context(request: Request, **fields: Any) -> dict[str, Any]:
    # LogRecord reserves "message"; error text goes under "error_message"
    return {"path": request.url.path, "method": request.method, **fields}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError into its status code and structured body."""
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra=_request_context(
                request,
                error_code=exc.error_code,
                error_message=exc.message,
                context=exc.context,
            ),
        )
    else:
        logger.info(
            "Client error",
            extra=_request_context(
                request, error_code=exc.error_code, error_message=exc.message
            ),
        )

    error_dict = exc.to_dict()
    content: dict[str, Any] = {"detail": error_dict["message"], "code": error_dict["code"]}

    # Calculator range errors name one field; report it in the list shape too
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]
    elif isinstance(exc, ValidationError) and "field" in exc.context:
        content["errors"] = [
            {"field": exc.context["field"], "message": exc.message, "code": "INVALID_VALUE"}
        ]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Schema-level rejections from the DTOs.

    e.g. a missing `principal`, `tenure_months=600` past its `le=480`,
    or an unknown scenario `type`.
    """
    errors = [
        {
            # drop the "body"/"query" prefix from the location
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra=_request_context(request, errors=errors))

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: logged with traceback, answered with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra=_request_context(
            request, error_type=type(exc).__name__, error_message=str(exc)
        ),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app. Call once per app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_request_validation_error  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
