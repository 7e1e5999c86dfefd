from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from rentdrive.domain.errors import InvalidState
from rentdrive.domain.vehicle import Vehicle
from rentdrive.ports.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class InMemoryInventoryStore(InventoryStore):
    """
    Canonical inventory implementation.

    - Stores vehicles in insertion order, as an immutable tuple
    - Rejects duplicate ids, negative rates and non-positive capacities at load
    - Class membership is checked by the query engine, not here
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles: tuple[Vehicle, ...] = tuple(vehicles)
        self._by_id: dict[str, Vehicle] = {}

        for vehicle in self._vehicles:
            self._check(vehicle)
            self._by_id[vehicle.id] = vehicle

        logger.info("Inventory loaded", extra={"vehicle_count": len(self._vehicles)})

    def all(self) -> Sequence[Vehicle]:
        return self._vehicles

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._by_id.get(vehicle_id)

    def __len__(self) -> int:
        return len(self._vehicles)

    def _check(self, vehicle: Vehicle) -> None:
        if vehicle.id in self._by_id:
            raise InvalidState("duplicate vehicle id in inventory", vehicle_id=vehicle.id)
        if vehicle.daily_rate < 0:
            raise InvalidState(
                "vehicle daily_rate must be >= 0",
                vehicle_id=vehicle.id,
                daily_rate=str(vehicle.daily_rate),
            )
        if vehicle.capacity <= 0:
            raise InvalidState(
                "vehicle capacity must be > 0",
                vehicle_id=vehicle.id,
                capacity=vehicle.capacity,
            )
