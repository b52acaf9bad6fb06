"""
Test suite for the /v1/scenarios routes.

Routes run against a fresh in-memory repository per test, wired in
through the get_scenario_repository dependency override.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finance_calc.adapters.in_memory_scenario_repository import InMemoryScenarioRepository
from finance_calc.entrypoints.http.dependencies import get_scenario_repository
from finance_calc.entrypoints.http.exception_handlers import register_exception_handlers
from finance_calc.entrypoints.http.routes.scenarios import router

UNKNOWN_ID = "550e8400-e29b-41d4-a716-446655440000"

EMI_SCENARIO = {
    "name": "Car loan",
    "type": "emi",
    "inputs": {"principal": "100000", "annual_rate_percent": "10", "tenure_months": 12},
    "notes": "Dealer offer",
}
SIP_SCENARIO = {
    "name": "Index fund",
    "type": "sip",
    "inputs": {"monthly_investment": "5000", "annual_return_percent": "12", "years": 10},
}


@pytest.fixture
def repository() -> InMemoryScenarioRepository:
    return InMemoryScenarioRepository()


@pytest.fixture
def app(repository: InMemoryScenarioRepository) -> FastAPI:
    """Create a test FastAPI app with scenarios router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_scenario_repository] = lambda: repository
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def created(client: TestClient) -> dict[str, Any]:
    """An EMI scenario saved through the API."""
    response = client.post("/v1/scenarios", json=EMI_SCENARIO)
    assert response.status_code == 201
    return response.json()


# ==============================================================================
# POST /v1/scenarios
# ==============================================================================


def test_create_returns_201_with_results(created: dict[str, Any]) -> None:
    assert created["name"] == "Car loan"
    assert created["type"] == "emi"
    assert created["notes"] == "Dealer offer"
    assert created["inputs"] == EMI_SCENARIO["inputs"]
    assert created["results"] == {
        "emi": "8792",
        "total_amount": "105499",
        "total_interest": "5499",
    }
    assert len(created["id"]) == 36
    assert created["created_at"] == created["updated_at"]


def test_create_ignores_submitted_results(client: TestClient) -> None:
    response = client.post(
        "/v1/scenarios", json={**EMI_SCENARIO, "results": {"emi": "1"}}
    )

    assert response.status_code == 201
    assert response.json()["results"]["emi"] == "8792"


def test_create_rejects_unknown_calculator_type(client: TestClient) -> None:
    response = client.post("/v1/scenarios", json={**EMI_SCENARIO, "type": "loan"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid request parameters"


def test_create_rejects_blank_name(client: TestClient) -> None:
    response = client.post("/v1/scenarios", json={**EMI_SCENARIO, "name": "   "})

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "name", "message": "Must not be blank", "code": "REQUIRED"}
    ]


def test_create_reports_every_input_error(client: TestClient) -> None:
    response = client.post(
        "/v1/scenarios",
        json={**EMI_SCENARIO, "inputs": {"principal": "lots", "tenure_months": 12}},
    )

    assert response.status_code == 422
    codes = {error["field"]: error["code"] for error in response.json()["errors"]}
    assert codes == {"principal": "INVALID_DECIMAL", "annual_rate_percent": "REQUIRED"}


def test_create_rejects_out_of_range_input(client: TestClient) -> None:
    response = client.post(
        "/v1/scenarios",
        json={**EMI_SCENARIO, "inputs": {**EMI_SCENARIO["inputs"], "tenure_months": 0}},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "tenure_months"


def test_create_rejects_input_above_calculator_cap(client: TestClient) -> None:
    response = client.post(
        "/v1/scenarios",
        json={
            "name": "Forever withdrawals",
            "type": "swp",
            "inputs": {
                "corpus": "1000000",
                "monthly_withdrawal": "10000",
                "annual_return_percent": "8",
                "years": 5000,
            },
        },
    )

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [
            {"field": "years", "message": "Must be less than or equal to 50", "code": "TOO_LARGE"}
        ],
    }
    assert client.get("/v1/scenarios").json()["total"] == 0


# ==============================================================================
# GET /v1/scenarios
# ==============================================================================


def test_list_returns_all_in_creation_order(client: TestClient) -> None:
    client.post("/v1/scenarios", json=EMI_SCENARIO)
    client.post("/v1/scenarios", json=SIP_SCENARIO)

    response = client.get("/v1/scenarios")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [s["name"] for s in data["scenarios"]] == ["Car loan", "Index fund"]


def test_list_filters_by_type(client: TestClient) -> None:
    client.post("/v1/scenarios", json=EMI_SCENARIO)
    client.post("/v1/scenarios", json=SIP_SCENARIO)

    data = client.get("/v1/scenarios", params={"type": "sip"}).json()

    assert data["total"] == 1
    assert data["scenarios"][0]["results"]["maturity_value"] == "1161695"


def test_list_rejects_unknown_type_filter(client: TestClient) -> None:
    response = client.get("/v1/scenarios", params={"type": "crypto"})

    assert response.status_code == 422


def test_list_empty(client: TestClient) -> None:
    assert client.get("/v1/scenarios").json() == {"scenarios": [], "total": 0}


# ==============================================================================
# GET /v1/scenarios/{id}
# ==============================================================================


def test_get_returns_scenario(client: TestClient, created: dict[str, Any]) -> None:
    response = client.get(f"/v1/scenarios/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_returns_404(client: TestClient) -> None:
    response = client.get(f"/v1/scenarios/{UNKNOWN_ID}")

    assert response.status_code == 404
    assert response.json() == {
        "detail": f"Scenario with identifier '{UNKNOWN_ID}' not found",
        "code": "NOT_FOUND",
    }


def test_get_malformed_id_returns_422(client: TestClient) -> None:
    response = client.get("/v1/scenarios/not-a-uuid")

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_UUID"


# ==============================================================================
# PUT /v1/scenarios/{id}
# ==============================================================================


def test_update_renames(client: TestClient, created: dict[str, Any]) -> None:
    response = client.put(f"/v1/scenarios/{created['id']}", json={"name": "Bike loan"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Bike loan"
    assert data["results"] == created["results"]
    assert data["notes"] == "Dealer offer"


def test_update_inputs_recalculates(client: TestClient, created: dict[str, Any]) -> None:
    response = client.put(
        f"/v1/scenarios/{created['id']}",
        json={"inputs": {"principal": "120000", "annual_rate_percent": "0", "tenure_months": 12}},
    )

    assert response.status_code == 200
    assert response.json()["results"] == {
        "emi": "10000",
        "total_amount": "120000",
        "total_interest": "0",
    }
    assert client.get(f"/v1/scenarios/{created['id']}").json()["results"]["emi"] == "10000"


def test_update_rejects_input_above_calculator_cap(
    client: TestClient, created: dict[str, Any]
) -> None:
    response = client.put(
        f"/v1/scenarios/{created['id']}",
        json={
            "inputs": {"principal": "100000", "annual_rate_percent": "75", "tenure_months": 12}
        },
    )

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {
            "field": "annual_rate_percent",
            "message": "Must be less than or equal to 50",
            "code": "TOO_LARGE",
        }
    ]
    assert client.get(f"/v1/scenarios/{created['id']}").json()["results"] == created["results"]


def test_update_unknown_returns_404(client: TestClient) -> None:
    response = client.put(f"/v1/scenarios/{UNKNOWN_ID}", json={"name": "x"})

    assert response.status_code == 404


# ==============================================================================
# DELETE /v1/scenarios/{id}
# ==============================================================================


def test_delete_returns_204_and_removes(client: TestClient, created: dict[str, Any]) -> None:
    response = client.delete(f"/v1/scenarios/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/v1/scenarios/{created['id']}").status_code == 404


def test_delete_unknown_returns_404(client: TestClient) -> None:
    assert client.delete(f"/v1/scenarios/{UNKNOWN_ID}").status_code == 404
