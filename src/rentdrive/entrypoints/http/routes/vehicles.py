from typing import Annotated

from fastapi import APIRouter, Depends, Query

from rentdrive.entrypoints.http.dependencies import (
    get_get_vehicle_by_id_use_case,
    get_list_featured_vehicles_use_case,
    get_query_catalog_use_case,
)
from rentdrive.entrypoints.http.dtos.vehicles import (
    FeaturedVehiclesResponseDTO,
    VehicleResponseDTO,
    VehicleSearchResponseDTO,
    VehiclesQueryDTO,
)
from rentdrive.entrypoints.http.error_responses import ErrorResponse
from rentdrive.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from rentdrive.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from rentdrive.use_cases.list_featured_vehicles import ListFeaturedVehicles
from rentdrive.use_cases.query_catalog import QueryCatalog


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleSearchResponseDTO,
    summary="Filter vehicle catalog",
    description="""
    Filter the rental fleet by class, daily rate and seat count.

    ## Filters
    - Filters combine with AND semantics
    - vehicle_class / capacity: repeatable; none given means no restriction
    - price_min / price_max: inclusive, within 0-200; default to the full range

    ## Ordering
    - MPV first, then SUV, then Sedan
    - Within a class, fleet order is preserved

    ## Example
    ```
    GET /v1/vehicles?vehicle_class=SUV&price_min=90
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "vehicles": [
                            {
                                "id": "2",
                                "name": "Honda CR-V",
                                "vehicle_class": "SUV",
                                "daily_rate": "95",
                                "capacity": 5,
                                "transmission": "Automatic",
                                "image_url": "https://images.unsplash.com/photo-1568844293986-8c1a5c4fe939",
                                "featured": True,
                            }
                        ],
                        "total": 1,
                        "filters": {
                            "vehicle_classes": ["SUV"],
                            "price_min": "90",
                            "price_max": "200",
                            "capacities": [],
                            "is_default": False,
                        },
                    }
                }
            },
        },
        422: {
            "description": "Invalid filter",
            "model": ErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "detail": "lower bound cannot be greater than upper bound",
                        "code": "INVALID_ARGUMENT",
                    }
                }
            },
        },
    },
)
def get_vehicles(
    query: Annotated[VehiclesQueryDTO, Query()],
    use_case: QueryCatalog = Depends(get_query_catalog_use_case),
) -> VehicleSearchResponseDTO:
    """Filter vehicles endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (applies the filter mutators)
    request = VehicleMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_response(result=result, request=request)


@router.get(
    "/vehicles/featured",
    response_model=FeaturedVehiclesResponseDTO,
    summary="Featured vehicles",
    description="Vehicles highlighted on the home page, in fleet order.",
)
def get_featured_vehicles(
    use_case: ListFeaturedVehicles = Depends(get_list_featured_vehicles_use_case),
) -> FeaturedVehiclesResponseDTO:
    return VehicleMapper.to_featured_response(use_case.execute().vehicles)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle",
    responses={
        404: {
            "description": "Vehicle not found",
            "model": ErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Vehicle with identifier '42' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
    },
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_vehicle_response(result.vehicle)
