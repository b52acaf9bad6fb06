"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health, calculators and scenarios with correct prefixes)
- OpenAPI schema generation
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finance_calc.entrypoints.http.app import build_app

CALCULATOR_PATHS = [
    "/v1/calculators/emi",
    "/v1/calculators/emi/schedule",
    "/v1/calculators/sip",
    "/v1/calculators/sip/step-up",
    "/v1/calculators/fd",
    "/v1/calculators/lumpsum",
    "/v1/calculators/cagr",
    "/v1/calculators/swp",
    "/v1/calculators/nps",
]


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


def test_build_app_fails_fast_on_bad_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")

    with pytest.raises(RuntimeError, match="LOG_LEVEL"):
        build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Finance Calc API"
    assert app.version == "0.1.0"
    assert "Personal-finance calculators" in app.description


def test_app_documentation_urls() -> None:
    app = build_app()

    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_registers_calculator_routes_under_v1() -> None:
    paths = build_app().openapi()["paths"]

    for path in CALCULATOR_PATHS:
        assert path in paths, path
        assert "post" in paths[path]

    assert "/calculators/emi" not in paths


def test_app_registers_scenario_routes_under_v1() -> None:
    paths = build_app().openapi()["paths"]

    assert set(paths["/v1/scenarios"]) == {"get", "post"}
    assert set(paths["/v1/scenarios/{scenario_id}"]) == {"get", "put", "delete"}


def test_app_openapi_documents_tags() -> None:
    paths = build_app().openapi()["paths"]

    assert paths["/health"]["get"]["tags"] == ["Health"]
    assert paths["/v1/calculators/emi"]["post"]["tags"] == ["Calculators"]
    assert paths["/v1/scenarios"]["get"]["tags"] == ["Scenarios"]
    assert paths["/v1/calculators/emi"]["post"]["summary"] == "Calculate loan EMI"


# ==============================================================================
# Route Accessibility
# ==============================================================================


def test_health_endpoint_responds() -> None:
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calculator_endpoint_responds_end_to_end() -> None:
    """No dependency overrides: real use cases behind the route."""
    client = TestClient(build_app())

    response = client.post(
        "/v1/calculators/emi",
        json={"principal": "100000", "annual_rate_percent": "10", "tenure_months": 12},
    )

    assert response.status_code == 200
    assert response.json() == {"emi": "8792", "total_amount": "105499", "total_interest": "5499"}


def test_error_bodies_survive_info_logging(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """With LOG_LEVEL=INFO the handlers' log records are emitted, not skipped."""
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    client = TestClient(build_app(), raise_server_exceptions=False)
    caplog.set_level(logging.INFO)

    fd = client.post(
        "/v1/calculators/fd",
        json={
            "principal": "100000",
            "annual_rate_percent": "7",
            "tenure_months": 24,
            "compounding_frequency": 3,
        },
    )
    missing = client.get("/v1/scenarios/550e8400-e29b-41d4-a716-446655440000")

    assert fd.status_code == 422
    assert fd.json()["errors"][0]["field"] == "compounding_frequency"
    assert missing.status_code == 404
    assert missing.json()["code"] == "NOT_FOUND"


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app())

    assert client.get("/unknown").status_code == 404
    assert client.get("/v1/unknown").status_code == 404


# ==============================================================================
# Application Structure
# ==============================================================================


def test_app_module_exports_app_instance() -> None:
    """App module exports 'app' instance at module level."""
    from finance_calc.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Finance Calc API"
