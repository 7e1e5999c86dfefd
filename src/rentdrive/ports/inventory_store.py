from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from rentdrive.domain.vehicle import Vehicle


class InventoryStore(ABC):
    """
    Port for the fixed vehicle inventory.

    Contract:
        - Populated once at process start, never mutated afterwards
        - all() returns vehicles in store order (insertion order); the query
          engine relies on this order for its stable tie-break
        - Filtering and ordering are NOT the store's job; see query_catalog
    """

    @abstractmethod
    def all(self) -> Sequence[Vehicle]:
        """Every vehicle, in store order."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Look up a single vehicle.

        Returns:
            The vehicle, or None if the id is unknown
        """
        ...
