from pydantic import BaseModel, ConfigDict, Field


class VehicleResponseDTO(BaseModel):
    id: str
    name: str
    vehicle_class: str
    daily_rate: str
    capacity: int
    transmission: str
    image_url: str
    featured: bool


class VehiclesQueryDTO(BaseModel):
    """Query parameters for filtering the vehicle catalog."""

    vehicle_class: list[str] = Field(
        default=[],
        description="Vehicle classes to include (repeatable). Empty means every class",
        examples=[["MPV", "SUV"]],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum daily rate (inclusive, decimal as string). Defaults to 0",
        examples=["90"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum daily rate (inclusive, decimal as string). Defaults to 200",
        examples=["200"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    capacity: list[int] = Field(
        default=[],
        description="Seat counts to include (repeatable). Empty means every capacity",
        examples=[[7]],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_class": ["SUV"],
                "price_min": "90",
                "price_max": "200",
                "capacity": [],
            }
        }
    )


class AppliedFiltersDTO(BaseModel):
    """The filter state the result was computed from."""

    vehicle_classes: list[str]
    price_min: str
    price_max: str
    capacities: list[int]
    is_default: bool = Field(
        description="True when no filter restricts the result (nothing to reset)",
    )


class VehicleSearchResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
    total: int
    filters: AppliedFiltersDTO


class FeaturedVehiclesResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
