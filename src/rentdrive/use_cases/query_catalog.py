from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rentdrive.domain.errors import InvalidState
from rentdrive.domain.facets import DEFAULT_CLASS_PRIORITY
from rentdrive.domain.filters import FilterState
from rentdrive.domain.vehicle import Vehicle, VehicleClass
from rentdrive.ports.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


def query(
    inventory: Iterable[Vehicle],
    filter_state: FilterState,
    class_priority: Mapping[VehicleClass, int] = DEFAULT_CLASS_PRIORITY,
) -> list[Vehicle]:
    """
    Filter the inventory by the selected facets and order by class priority.

    - Empty class / capacity selections mean "no restriction"
    - Price range is always applied, inclusive on both ends
    - Ordering is a stable sort on class priority: vehicles of the same class
      keep their store order

    The whole inventory is re-scanned on every call; nothing is cached.

    Raises:
        InvalidState: If a vehicle's class has no priority (unrecognised class)
    """
    vehicles = list(inventory)

    # Fail fast on bad data before any filter can hide it
    for vehicle in vehicles:
        if vehicle.vehicle_class not in class_priority:
            raise InvalidState(
                "vehicle class is not recognised",
                vehicle_id=vehicle.id,
                vehicle_class=repr(vehicle.vehicle_class),
            )

    classes = filter_state.selected_classes
    price_range = filter_state.price_range
    seats = filter_state.selected_capacities

    matches = [
        vehicle
        for vehicle in vehicles
        if (not classes or vehicle.vehicle_class in classes)
        and price_range.contains(vehicle.daily_rate)
        and (not seats or vehicle.capacity in seats)
    ]

    # list.sort is stable
    matches.sort(key=lambda vehicle: class_priority[vehicle.vehicle_class])
    return matches


@dataclass(frozen=True, slots=True)
class QueryCatalogRequest:
    filters: FilterState


@dataclass(frozen=True, slots=True)
class QueryCatalogResponse:
    vehicles: list[Vehicle]

    @property
    def total_count(self) -> int:
        """Backs the "Showing N vehicles" line."""
        return len(self.vehicles)


class QueryCatalog:
    """
    Catalog query over the inventory store.

    The filter state arrives already validated: FilterState and PriceRange
    check their own fields on construction and reject bad input.
    """

    def __init__(
        self,
        inventory_store: InventoryStore,
        class_priority: Mapping[VehicleClass, int] = DEFAULT_CLASS_PRIORITY,
    ) -> None:
        self._inventory_store = inventory_store
        self._class_priority = class_priority

    def execute(self, request: QueryCatalogRequest) -> QueryCatalogResponse:
        """
        Execute catalog query.

        Raises:
            InvalidState: If the inventory holds a vehicle with an unknown class
        """
        vehicles = query(self._inventory_store.all(), request.filters, self._class_priority)

        logger.debug(
            "Catalog queried",
            extra={
                "classes": sorted(c.value for c in request.filters.selected_classes),
                "price_lower": str(request.filters.price_range.lower),
                "price_upper": str(request.filters.price_range.upper),
                "capacities": sorted(request.filters.selected_capacities),
                "result_count": len(vehicles),
            },
        )

        return QueryCatalogResponse(vehicles=vehicles)
