from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from rentdrive.entrypoints.http.dtos.vehicles import VehicleResponseDTO


class BookingRequestDTO(BaseModel):
    """Booking form payload. Required fields are checked by the domain."""

    name: str = Field(description="Full name", examples=["John Doe"])
    phone: str = Field(description="Phone / WhatsApp number", examples=["+1 (555) 123-4567"])
    email: str | None = Field(default=None, examples=["john@example.com"])
    vehicle_id: str = Field(description="Vehicle to book", examples=["2"])
    pickup_date: date | None = Field(default=None, examples=["2026-11-02"])
    return_date: date | None = Field(default=None, examples=["2026-11-05"])
    message: str | None = Field(default=None, examples=["Need a child seat"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "phone": "+1 (555) 123-4567",
                "email": "john@example.com",
                "vehicle_id": "2",
                "pickup_date": "2026-11-02",
                "return_date": "2026-11-05",
                "message": "Need a child seat",
            }
        }
    )


class BookingAcknowledgmentDTO(BaseModel):
    """Acknowledgment shown after the form is submitted. Nothing is reserved."""

    title: str
    message: str
    vehicle: VehicleResponseDTO
    vehicle_label: str = Field(
        description="Label as shown in the vehicle select",
        examples=["Honda CR-V - $95/day"],
    )
    pickup_date: date
    return_date: date
    rental_days: int
    estimated_total: str = Field(
        description="daily_rate × rental_days as decimal string",
        examples=["285"],
    )
