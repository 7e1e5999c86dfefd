from __future__ import annotations

from decimal import Decimal

from rentdrive.domain import filters
from rentdrive.domain.facets import class_facets
from rentdrive.domain.filters import PRICE_CEILING, PRICE_FLOOR, FilterState
from rentdrive.domain.vehicle import Vehicle
from rentdrive.entrypoints.http.dtos.catalog_facets import (
    CatalogFacetsResponseDTO,
    PriceDomainDTO,
)
from rentdrive.entrypoints.http.dtos.vehicles import (
    AppliedFiltersDTO,
    FeaturedVehiclesResponseDTO,
    VehicleResponseDTO,
    VehicleSearchResponseDTO,
    VehiclesQueryDTO,
)
from rentdrive.use_cases.get_catalog_facets import CatalogFacets
from rentdrive.use_cases.query_catalog import QueryCatalogRequest, QueryCatalogResponse


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle catalog."""

    @staticmethod
    def to_filter_state(dto: VehiclesQueryDTO) -> FilterState:
        """
        Builds a filter state by applying the domain mutators to the default state.

        Repeated query values are collapsed first, so ``?capacity=7&capacity=7``
        selects 7 once instead of toggling it back off.

        Raises:
            InvalidArgument: If a class, capacity or price bound is rejected by the domain
        """
        state = filters.reset()

        for vehicle_class in dict.fromkeys(dto.vehicle_class):
            state = filters.toggle_class(state, vehicle_class)

        if dto.price_min is not None or dto.price_max is not None:
            state = filters.set_price_range(
                state,
                Decimal(dto.price_min) if dto.price_min is not None else PRICE_FLOOR,
                Decimal(dto.price_max) if dto.price_max is not None else PRICE_CEILING,
            )

        for capacity in dict.fromkeys(dto.capacity):
            state = filters.toggle_capacity(state, capacity)

        return state

    @staticmethod
    def to_domain_request(dto: VehiclesQueryDTO) -> QueryCatalogRequest:
        return QueryCatalogRequest(filters=VehicleMapper.to_filter_state(dto))

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle entity to REST response DTO.

        Handles Decimal → str and enum → str conversion at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            name=vehicle.name,
            vehicle_class=vehicle.vehicle_class.value,
            daily_rate=str(vehicle.daily_rate),  # Decimal → str at boundary
            capacity=vehicle.capacity,
            transmission=vehicle.transmission.value,
            image_url=vehicle.image_url,
            featured=vehicle.featured,
        )

    @staticmethod
    def to_applied_filters(state: FilterState) -> AppliedFiltersDTO:
        return AppliedFiltersDTO(
            vehicle_classes=[c.value for c in class_facets() if c in state.selected_classes],
            price_min=str(state.price_range.lower),
            price_max=str(state.price_range.upper),
            capacities=sorted(state.selected_capacities),
            is_default=state.is_default,
        )

    @staticmethod
    def to_response(
        result: QueryCatalogResponse,
        request: QueryCatalogRequest,
    ) -> VehicleSearchResponseDTO:
        return VehicleSearchResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
            total=result.total_count,
            filters=VehicleMapper.to_applied_filters(request.filters),
        )

    @staticmethod
    def to_featured_response(vehicles: list[Vehicle]) -> FeaturedVehiclesResponseDTO:
        return FeaturedVehiclesResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in vehicles],
        )

    @staticmethod
    def to_facets_response(facets: CatalogFacets) -> CatalogFacetsResponseDTO:
        return CatalogFacetsResponseDTO(
            vehicle_classes=[c.value for c in facets.vehicle_classes],
            capacities=facets.capacities,
            price=PriceDomainDTO(
                min=str(facets.price.minimum),
                max=str(facets.price.maximum),
                step=str(facets.price.step),
            ),
        )
