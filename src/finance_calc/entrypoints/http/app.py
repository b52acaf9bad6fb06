import logging

from fastapi import FastAPI

from finance_calc.entrypoints.http.exception_handlers import register_exception_handlers
from finance_calc.entrypoints.http.routes.calculators import router as calculators_router
from finance_calc.entrypoints.http.routes.health import router as health_router
from finance_calc.entrypoints.http.routes.scenarios import router as scenarios_router
from finance_calc.infra.config import log_level


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Finance Calc API",
        description="""
        Personal-finance calculators and saved scenarios.

        ## Features
        - Loan EMI and amortization schedule
        - SIP, step-up SIP, fixed deposit, lumpsum and CAGR
        - Systematic withdrawal plan (SWP) and NPS pension projection
        - Save, list, update and delete calculator scenarios

        ## Monetary Values
        Amounts and rates are exchanged as decimal strings and computed with
        exact decimal arithmetic. Results are whole currency units, rounded
        half away from zero.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(calculators_router, prefix="/v1")
    app.include_router(scenarios_router, prefix="/v1")

    return app


app = build_app()
