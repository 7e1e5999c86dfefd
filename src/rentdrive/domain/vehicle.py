from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class VehicleClass(str, Enum):
    MPV = "MPV"
    SUV = "SUV"
    SEDAN = "Sedan"


class Transmission(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    name: str
    vehicle_class: VehicleClass
    daily_rate: Decimal
    capacity: int
    transmission: Transmission
    image_url: str
    featured: bool = False


def vehicle_option_label(vehicle: Vehicle) -> str:
    """Label used by the booking form's vehicle select, e.g. ``Honda CR-V - $95/day``."""
    return f"{vehicle.name} - ${vehicle.daily_rate}/day"
