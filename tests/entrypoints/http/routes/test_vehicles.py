"""
Test suite for the /v1/vehicles routes.

- GET /v1/vehicles: query parameters flow through the filter mutators into the query engine
- GET /v1/vehicles/featured
- GET /v1/vehicles/{vehicle_id}
- Error responses for rejected filters and unknown vehicles
"""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rentdrive.adapters.in_memory_inventory_store import InMemoryInventoryStore
from rentdrive.data.fleet import FLEET
from rentdrive.domain.errors import InvalidState
from rentdrive.domain.filters import FilterState
from rentdrive.entrypoints.http.dependencies import (
    get_inventory_store,
    get_query_catalog_use_case,
)
from rentdrive.entrypoints.http.exception_handlers import register_exception_handlers
from rentdrive.entrypoints.http.routes.vehicles import router
from rentdrive.use_cases.query_catalog import QueryCatalogResponse


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with vehicles router over the built-in fleet."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_inventory_store] = lambda: InMemoryInventoryStore(FLEET)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def ids(response_json: dict) -> list[str]:
    return [vehicle["id"] for vehicle in response_json["vehicles"]]


# ==============================================================================
# GET /v1/vehicles - Happy Path
# ==============================================================================


def test_no_filters_returns_whole_fleet_in_class_order(client: TestClient) -> None:
    response = client.get("/v1/vehicles")

    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 9
    assert ids(data) == ["1", "3", "5", "7", "2", "4", "6", "8", "9"]
    assert data["filters"] == {
        "vehicle_classes": [],
        "price_min": "0",
        "price_max": "200",
        "capacities": [],
        "is_default": True,
    }


def test_suv_from_90_up(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"vehicle_class": "SUV", "price_min": "90"})

    assert response.status_code == 200
    data = response.json()

    assert ids(data) == ["2", "4", "6"]
    assert data["vehicles"][0] == {
        "id": "2",
        "name": "Honda CR-V",
        "vehicle_class": "SUV",
        "daily_rate": "95",
        "capacity": 5,
        "transmission": "Automatic",
        "image_url": FLEET[1].image_url,
        "featured": True,
    }
    assert data["filters"]["vehicle_classes"] == ["SUV"]
    assert data["filters"]["price_min"] == "90"
    assert data["filters"]["price_max"] == "200"
    assert data["filters"]["is_default"] is False


def test_repeated_class_params_are_or_combined(client: TestClient) -> None:
    response = client.get(
        "/v1/vehicles", params=[("vehicle_class", "Sedan"), ("vehicle_class", "MPV")]
    )

    data = response.json()
    assert data["total"] == 6
    # Applied filters are echoed in priority order
    assert data["filters"]["vehicle_classes"] == ["MPV", "Sedan"]


def test_capacity_filter(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"capacity": 7})

    assert ids(response.json()) == ["1", "3", "5", "7", "4"]


def test_duplicate_capacity_selects_once(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params=[("capacity", 7), ("capacity", 7)])

    assert response.json()["total"] == 5
    assert response.json()["filters"]["capacities"] == [7]


def test_price_only_max(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"price_max": "70"})

    data = response.json()
    assert ids(data) == ["7", "8"]
    assert data["filters"]["price_min"] == "0"


def test_no_match_returns_empty_list(client: TestClient) -> None:
    response = client.get(
        "/v1/vehicles", params={"vehicle_class": "Sedan", "price_min": "150"}
    )

    assert response.status_code == 200
    assert response.json()["vehicles"] == []
    assert response.json()["total"] == 0


def test_route_delegates_to_use_case(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.return_value = QueryCatalogResponse(vehicles=[FLEET[7]])
    app.dependency_overrides[get_query_catalog_use_case] = lambda: mock_use_case

    response = client.get("/v1/vehicles", params={"vehicle_class": "Sedan"})

    assert ids(response.json()) == ["8"]
    mock_use_case.execute.assert_called_once()
    request = mock_use_case.execute.call_args.args[0]
    assert request.filters != FilterState()


# ==============================================================================
# GET /v1/vehicles - Rejected Filters
# ==============================================================================


@pytest.mark.parametrize(
    ("params", "code"),
    [
        ({"price_min": "150", "price_max": "100"}, "INVALID_ARGUMENT"),
        ({"price_max": "250"}, "INVALID_ARGUMENT"),
        ({"vehicle_class": "Truck"}, "INVALID_ARGUMENT"),
        ({"capacity": 0}, "INVALID_ARGUMENT"),
        ({"capacity": -2}, "INVALID_ARGUMENT"),
        ({"price_min": "abc"}, "VALIDATION_ERROR"),
        ({"price_min": "-5"}, "VALIDATION_ERROR"),
        ({"capacity": "two"}, "VALIDATION_ERROR"),
    ],
)
def test_rejected_filters_return_422(client: TestClient, params: dict, code: str) -> None:
    response = client.get("/v1/vehicles", params=params)

    assert response.status_code == 422
    assert response.json()["code"] == code


def test_inverted_price_range_message(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"price_min": "150", "price_max": "100"})

    assert response.json()["detail"] == "lower bound cannot be greater than upper bound"


def test_corrupt_inventory_returns_500(app: FastAPI, client: TestClient) -> None:
    corrupt = replace(FLEET[0], vehicle_class="Truck")
    store = Mock()
    store.all.return_value = [corrupt, *FLEET[1:]]
    app.dependency_overrides[get_inventory_store] = lambda: store

    response = client.get("/v1/vehicles")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "vehicle class is not recognised",
        "code": InvalidState.error_code,
    }


# ==============================================================================
# GET /v1/vehicles/featured
# ==============================================================================


def test_featured_vehicles(client: TestClient) -> None:
    response = client.get("/v1/vehicles/featured")

    assert response.status_code == 200
    assert ids(response.json()) == ["1", "2", "3", "4"]


# ==============================================================================
# GET /v1/vehicles/{vehicle_id}
# ==============================================================================


def test_get_vehicle_by_id(client: TestClient) -> None:
    response = client.get("/v1/vehicles/7")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Toyota Avanza"
    assert data["transmission"] == "Manual"
    assert data["featured"] is False


def test_unknown_vehicle_returns_404(client: TestClient) -> None:
    response = client.get("/v1/vehicles/42")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Vehicle with identifier '42' not found",
        "code": "NOT_FOUND",
    }
