"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rentdrive.domain.errors import (
    InternalError,
    InvalidArgument,
    InvalidState,
    NotFoundError,
    ValidationError,
)
from rentdrive.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "name", "message": "Is required", "code": "REQUIRED"},
                {
                    "field": "return_date",
                    "message": "Must be on or after pickup_date",
                    "code": "INVALID_RANGE",
                },
            ]
        )

    @test_app.get("/invalid-argument")
    def raise_invalid_argument() -> None:
        raise InvalidArgument(
            "lower bound cannot be greater than upper bound", lower="150", upper="100"
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Vehicle", "42")

    @test_app.get("/internal-error")
    def raise_internal_error() -> dict:
        raise InternalError("Unexpected condition")

    @test_app.get("/invalid-state")
    def raise_invalid_state() -> dict:
        raise InvalidState("vehicle class is not recognised", vehicle_id="9", value="Truck")

    @test_app.get("/value-error")
    def raise_value_error() -> dict:
        raise ValueError("Invalid decimal format")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed/{count}")
    def typed_param(count: int) -> dict:
        return {"count": count}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert len(data["errors"]) == 2
        assert data["errors"][0] == {"field": "name", "message": "Is required", "code": "REQUIRED"}
        assert data["errors"][1]["field"] == "return_date"
        assert data["errors"][1]["code"] == "INVALID_RANGE"


class TestInvalidArgumentHandler:
    """Tests for InvalidArgument (rejected filter mutation)."""

    def test_invalid_argument_returns_422(self, client: TestClient) -> None:
        response = client.get("/invalid-argument")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "lower bound cannot be greater than upper bound",
            "code": "INVALID_ARGUMENT",
        }


class TestNotFoundErrorHandler:
    """Tests for NotFoundError exception handler."""

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Vehicle with identifier '42' not found",
            "code": "NOT_FOUND",
        }


class TestInternalErrorHandlers:
    """Tests for server-side domain errors."""

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Unexpected condition",
            "code": "INTERNAL_ERROR",
        }

    def test_invalid_state_returns_500_without_context(self, client: TestClient) -> None:
        response = client.get("/invalid-state")

        assert response.status_code == 500
        # Context (vehicle id, offending value) stays in the logs
        assert response.json() == {
            "detail": "vehicle class is not recognised",
            "code": "INVALID_STATE",
        }

    def test_invalid_state_is_logged_at_error_level(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="rentdrive.entrypoints.http.exception_handlers"):
            client.get("/invalid-state")

        records = [r for r in caplog.records if r.getMessage() == "Domain error occurred"]
        assert len(records) == 1
        assert records[0].error_code == "INVALID_STATE"  # type: ignore[attr-defined]
        assert records[0].context == {"vehicle_id": "9", "value": "Truck"}  # type: ignore[attr-defined]


class TestRequestValidationErrorHandler:
    """Tests for FastAPI request validation errors."""

    def test_type_error_returns_422_with_field_path(self, client: TestClient) -> None:
        response = client.get("/typed/two")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        # 'path' prefix is kept, 'query'/'body' prefixes are dropped
        assert data["errors"][0]["field"] == "path.count"
        assert data["errors"][0]["code"] == "int_parsing"


class TestValueErrorHandler:
    """Tests for ValueError exception handler."""

    def test_value_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/value-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Invalid decimal format",
            "code": "INVALID_VALUE",
        }


class TestUnexpectedErrorHandler:
    """Tests for catch-all exception handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }

    def test_unexpected_error_does_not_leak_message(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert "Something went wrong" not in response.text
