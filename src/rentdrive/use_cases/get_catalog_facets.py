from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rentdrive.domain.facets import (
    DEFAULT_CLASS_PRIORITY,
    PriceDomain,
    capacities,
    class_facets,
    price_domain,
)
from rentdrive.domain.vehicle import VehicleClass
from rentdrive.ports.inventory_store import InventoryStore


@dataclass(frozen=True, slots=True)
class CatalogFacets:
    vehicle_classes: list[VehicleClass]
    capacities: list[int]
    price: PriceDomain


class GetCatalogFacets:
    """
    Everything the filter sidebar needs to render its controls.

    Independent of any filter state: capacities come from the inventory alone.
    """

    def __init__(
        self,
        inventory_store: InventoryStore,
        class_priority: Mapping[VehicleClass, int] = DEFAULT_CLASS_PRIORITY,
    ) -> None:
        self._inventory_store = inventory_store
        self._class_priority = class_priority

    def execute(self) -> CatalogFacets:
        return CatalogFacets(
            vehicle_classes=class_facets(self._class_priority),
            capacities=capacities(self._inventory_store.all()),
            price=price_domain(),
        )
