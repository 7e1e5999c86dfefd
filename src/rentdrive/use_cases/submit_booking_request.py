from __future__ import annotations

import logging

from rentdrive.domain.booking import (
    ACKNOWLEDGMENT_MESSAGE,
    ACKNOWLEDGMENT_TITLE,
    BookingAcknowledgment,
    BookingRequest,
)
from rentdrive.domain.errors import InternalError, ValidationError
from rentdrive.ports.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class SubmitBookingRequest:
    """
    Acknowledge a booking intent from the contact form.

    Nothing is stored, reserved or charged. The estimate uses exact decimal
    arithmetic: estimated_total = daily_rate * rental_days.
    """

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    def execute(self, req: BookingRequest) -> BookingAcknowledgment:
        """
        Raises:
            ValidationError: If form fields are invalid or the vehicle is unknown
            InternalError: If validation let a missing date through
        """
        req.validate()

        vehicle = self._inventory_store.get_by_id(req.vehicle_id)
        if vehicle is None:
            # A form field, so reported as validation rather than 404
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": f"Unknown vehicle: {req.vehicle_id}",
                        "code": "UNKNOWN_VEHICLE",
                    }
                ]
            )

        # validate() already rejected missing dates; this narrows the types
        if req.pickup_date is None or req.return_date is None:
            raise InternalError("booking dates missing after validation")

        rental_days = req.rental_days
        estimated_total = vehicle.daily_rate * rental_days

        logger.info(
            "Booking request acknowledged",
            extra={
                "vehicle_id": vehicle.id,
                "rental_days": rental_days,
                "estimated_total": str(estimated_total),
            },
        )

        return BookingAcknowledgment(
            title=ACKNOWLEDGMENT_TITLE,
            message=ACKNOWLEDGMENT_MESSAGE,
            vehicle=vehicle,
            pickup_date=req.pickup_date,
            return_date=req.return_date,
            rental_days=rental_days,
            estimated_total=estimated_total,
        )
