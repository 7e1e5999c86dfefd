"""Tests for booking form validation."""

from __future__ import annotations

from datetime import date

import pytest

from rentdrive.domain.booking import BookingRequest
from rentdrive.domain.errors import ValidationError


def _request(**overrides: object) -> BookingRequest:
    fields: dict[str, object] = {
        "name": "John Doe",
        "phone": "+1 (555) 123-4567",
        "vehicle_id": "2",
        "pickup_date": date(2026, 11, 2),
        "return_date": date(2026, 11, 5),
    }
    fields.update(overrides)
    return BookingRequest(**fields)  # type: ignore[arg-type]


def _failing_fields(request: BookingRequest) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        request.validate()
    assert exc_info.value.errors is not None
    return [error["field"] for error in exc_info.value.errors]


def test_valid_request_passes() -> None:
    _request(email="john@example.com", message="Child seat please").validate()


def test_email_and_message_are_optional() -> None:
    _request(email=None, message=None).validate()


def test_blank_required_fields_are_all_reported() -> None:
    request = _request(name="  ", phone="", vehicle_id="")

    assert _failing_fields(request) == ["name", "phone", "vehicle_id"]


def test_missing_dates_are_reported() -> None:
    assert _failing_fields(_request(pickup_date=None, return_date=None)) == [
        "pickup_date",
        "return_date",
    ]


def test_email_without_at_sign_is_rejected() -> None:
    assert _failing_fields(_request(email="john.example.com")) == ["email"]


def test_return_before_pickup_is_rejected() -> None:
    request = _request(pickup_date=date(2026, 11, 5), return_date=date(2026, 11, 2))

    with pytest.raises(ValidationError) as exc_info:
        request.validate()

    assert exc_info.value.errors == [
        {
            "field": "return_date",
            "message": "Must be on or after pickup_date",
            "code": "INVALID_RANGE",
        }
    ]


def test_rental_days_counts_nights() -> None:
    assert _request().rental_days == 3


def test_same_day_return_counts_as_one_day() -> None:
    request = _request(pickup_date=date(2026, 11, 2), return_date=date(2026, 11, 2))

    request.validate()
    assert request.rental_days == 1


def test_rental_days_requires_dates() -> None:
    with pytest.raises(ValueError):
        _ = _request(return_date=None).rental_days
