from __future__ import annotations

from dataclasses import dataclass

from rentdrive.domain.vehicle import Vehicle
from rentdrive.ports.inventory_store import InventoryStore


@dataclass(frozen=True, slots=True)
class ListFeaturedVehiclesResponse:
    vehicles: list[Vehicle]


class ListFeaturedVehicles:
    """Home page highlight: featured vehicles in store order, no class sorting."""

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    def execute(self) -> ListFeaturedVehiclesResponse:
        return ListFeaturedVehiclesResponse(
            vehicles=[vehicle for vehicle in self._inventory_store.all() if vehicle.featured]
        )
