"""Facet values available to the catalog's filter controls."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from rentdrive.domain.filters import PRICE_CEILING, PRICE_FLOOR, PRICE_STEP
from rentdrive.domain.vehicle import Vehicle, VehicleClass


# Family-oriented classes first. Business policy, not derived from the data.
DEFAULT_CLASS_PRIORITY: Mapping[VehicleClass, int] = {
    VehicleClass.MPV: 0,
    VehicleClass.SUV: 1,
    VehicleClass.SEDAN: 2,
}


@dataclass(frozen=True, slots=True)
class PriceDomain:
    minimum: Decimal = PRICE_FLOOR
    maximum: Decimal = PRICE_CEILING
    step: Decimal = PRICE_STEP


def capacities(inventory: Iterable[Vehicle]) -> list[int]:
    """Distinct seat counts present in the inventory, ascending."""
    return sorted({vehicle.capacity for vehicle in inventory})


def class_facets(
    class_priority: Mapping[VehicleClass, int] = DEFAULT_CLASS_PRIORITY,
) -> list[VehicleClass]:
    """Vehicle classes in display (priority) order."""
    return sorted(class_priority, key=class_priority.__getitem__)


def price_domain() -> PriceDomain:
    return PriceDomain()
