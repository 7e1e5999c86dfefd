from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from rentdrive.domain.errors import ValidationError
from rentdrive.domain.vehicle import Vehicle


ACKNOWLEDGMENT_TITLE = "Booking Request Sent!"
ACKNOWLEDGMENT_MESSAGE = "We'll contact you shortly to confirm your reservation."
MIN_RENTAL_DAYS = 1


@dataclass(frozen=True, slots=True)
class BookingRequest:
    """Booking intent captured by the contact form. Nothing is reserved."""

    name: str
    phone: str
    vehicle_id: str
    pickup_date: date | None
    return_date: date | None
    email: str | None = None
    message: str | None = None

    def validate(self) -> None:
        """
        Validate form fields, reporting every failing field at once.

        Raises:
            ValidationError: With one entry per failing field
        """
        errors: list[dict[str, str]] = []

        for field_name in ("name", "phone", "vehicle_id"):
            if not getattr(self, field_name).strip():
                errors.append(_required(field_name))

        if self.email and "@" not in self.email:
            errors.append(
                {
                    "field": "email",
                    "message": "Must be a valid email address",
                    "code": "INVALID_EMAIL",
                }
            )

        if self.pickup_date is None:
            errors.append(_required("pickup_date"))
        if self.return_date is None:
            errors.append(_required("return_date"))
        if (
            self.pickup_date is not None
            and self.return_date is not None
            and self.return_date < self.pickup_date
        ):
            errors.append(
                {
                    "field": "return_date",
                    "message": "Must be on or after pickup_date",
                    "code": "INVALID_RANGE",
                }
            )

        if errors:
            raise ValidationError(errors=errors)

    @property
    def rental_days(self) -> int:
        """Whole days between pickup and return; a same-day return counts as one."""
        if self.pickup_date is None or self.return_date is None:
            raise ValueError("rental_days requires both dates")
        return max((self.return_date - self.pickup_date).days, MIN_RENTAL_DAYS)


@dataclass(frozen=True, slots=True)
class BookingAcknowledgment:
    title: str
    message: str
    vehicle: Vehicle
    pickup_date: date
    return_date: date
    rental_days: int
    estimated_total: Decimal


def _required(field_name: str) -> dict[str, str]:
    return {"field": field_name, "message": "Is required", "code": "REQUIRED"}
