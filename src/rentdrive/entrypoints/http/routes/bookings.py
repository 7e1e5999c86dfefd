from fastapi import APIRouter, Depends

from rentdrive.entrypoints.http.dependencies import get_submit_booking_request_use_case
from rentdrive.entrypoints.http.dtos.booking import (
    BookingAcknowledgmentDTO,
    BookingRequestDTO,
)
from rentdrive.entrypoints.http.error_responses import ErrorResponse
from rentdrive.entrypoints.http.mappers.booking_mapper import BookingMapper
from rentdrive.use_cases.submit_booking_request import SubmitBookingRequest


router = APIRouter(tags=["Bookings"])


@router.post(
    "/bookings",
    response_model=BookingAcknowledgmentDTO,
    summary="Submit booking request",
    description="""
    Acknowledge a booking request from the contact form.

    Nothing is reserved, stored or charged: staff follow up by phone.

    ## Validation
    - name, phone, vehicle_id, pickup_date, return_date are required
    - email is optional but must look like an address
    - return_date must be on or after pickup_date
    - vehicle_id must exist in the fleet

    ## Estimate
    - rental_days = return_date - pickup_date (minimum 1)
    - estimated_total = daily_rate × rental_days
    """,
    responses={
        422: {
            "description": "Validation error",
            "model": ErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "phone",
                                "message": "Is required",
                                "code": "REQUIRED",
                            }
                        ],
                    }
                }
            },
        },
    },
)
def submit_booking_request(
    payload: BookingRequestDTO,
    use_case: SubmitBookingRequest = Depends(get_submit_booking_request_use_case),
) -> BookingAcknowledgmentDTO:
    """
    Submit booking request endpoint.

    1. Map: Convert DTO to domain request
    2. Execute: Call use case (which validates the form)
    3. Map: Convert acknowledgment to response DTO
    """
    request = BookingMapper.to_domain_request(payload)

    acknowledgment = use_case.execute(request)

    return BookingMapper.to_response(acknowledgment)
