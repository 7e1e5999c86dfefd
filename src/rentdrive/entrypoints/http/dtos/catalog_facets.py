from pydantic import BaseModel, ConfigDict


class PriceDomainDTO(BaseModel):
    min: str
    max: str
    step: str


class CatalogFacetsResponseDTO(BaseModel):
    """Values for the filter sidebar controls."""

    vehicle_classes: list[str]
    capacities: list[int]
    price: PriceDomainDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_classes": ["MPV", "SUV", "Sedan"],
                "capacities": [5, 7],
                "price": {"min": "0", "max": "200", "step": "10"},
            }
        }
    )
