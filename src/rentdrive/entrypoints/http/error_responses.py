"""REST API error response models.

Documents the body produced by exception_handlers.py for every error status.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "return_date",
                "message": "Must be on or after pickup_date",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Simple errors carry detail and code; booking form and request-parameter
    errors add an errors array with one entry per field.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "lower bound cannot be greater than upper bound",
                    "code": "INVALID_ARGUMENT",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "name", "message": "Is required", "code": "REQUIRED"},
                        {"field": "phone", "message": "Is required", "code": "REQUIRED"},
                    ],
                },
            ]
        }
    )
