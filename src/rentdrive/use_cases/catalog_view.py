from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

from rentdrive.domain import filters
from rentdrive.domain.facets import DEFAULT_CLASS_PRIORITY, capacities
from rentdrive.domain.filters import FilterState
from rentdrive.domain.vehicle import Vehicle, VehicleClass
from rentdrive.use_cases.query_catalog import query


class CatalogView:
    """
    One active catalog view: owns a FilterState and the result it produces.

    Every mutator swaps in a new state and recomputes the result before
    returning. A rejected mutation raises InvalidArgument and leaves both the
    state and the result as they were.
    """

    def __init__(
        self,
        inventory: Sequence[Vehicle],
        class_priority: Mapping[VehicleClass, int] = DEFAULT_CLASS_PRIORITY,
    ) -> None:
        self._inventory = tuple(inventory)
        self._class_priority = class_priority
        # Computed once; the inventory never changes under a view
        self._capacities = capacities(self._inventory)
        self._state = FilterState()
        self._results = query(self._inventory, self._state, self._class_priority)

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def results(self) -> list[Vehicle]:
        return list(self._results)

    @property
    def count(self) -> int:
        return len(self._results)

    @property
    def capacities(self) -> list[int]:
        return list(self._capacities)

    def toggle_class(self, vehicle_class: VehicleClass | str) -> list[Vehicle]:
        return self._apply(filters.toggle_class(self._state, vehicle_class))

    def toggle_capacity(self, capacity: int) -> list[Vehicle]:
        return self._apply(filters.toggle_capacity(self._state, capacity))

    def set_price_range(self, lower: Decimal | int, upper: Decimal | int) -> list[Vehicle]:
        return self._apply(filters.set_price_range(self._state, lower, upper))

    def reset(self) -> list[Vehicle]:
        return self._apply(filters.reset(self._state))

    def _apply(self, state: FilterState) -> list[Vehicle]:
        results = query(self._inventory, state, self._class_priority)
        self._state = state
        self._results = results
        return list(results)
