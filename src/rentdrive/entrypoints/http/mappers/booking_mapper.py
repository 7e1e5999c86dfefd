from __future__ import annotations

from rentdrive.domain.booking import BookingAcknowledgment, BookingRequest
from rentdrive.domain.vehicle import vehicle_option_label
from rentdrive.entrypoints.http.dtos.booking import (
    BookingAcknowledgmentDTO,
    BookingRequestDTO,
)
from rentdrive.entrypoints.http.mappers.vehicle_mapper import VehicleMapper


class BookingMapper:
    """Maps between REST DTOs and domain models for booking requests."""

    @staticmethod
    def to_domain_request(dto: BookingRequestDTO) -> BookingRequest:
        return BookingRequest(
            name=dto.name,
            phone=dto.phone,
            email=dto.email or None,
            vehicle_id=dto.vehicle_id,
            pickup_date=dto.pickup_date,
            return_date=dto.return_date,
            message=dto.message or None,
        )

    @staticmethod
    def to_response(ack: BookingAcknowledgment) -> BookingAcknowledgmentDTO:
        """Handles Decimal → string conversion at the boundary."""
        return BookingAcknowledgmentDTO(
            title=ack.title,
            message=ack.message,
            vehicle=VehicleMapper.to_vehicle_response(ack.vehicle),
            vehicle_label=vehicle_option_label(ack.vehicle),
            pickup_date=ack.pickup_date,
            return_date=ack.return_date,
            rental_days=ack.rental_days,
            estimated_total=str(ack.estimated_total),
        )
