"""
Built-in RentDrive fleet.

Store order matters: the catalog keeps it as the tie-break within a class.
"""

from __future__ import annotations

from decimal import Decimal

from rentdrive.domain.vehicle import Transmission, Vehicle, VehicleClass


_IMAGE_BASE = "https://images.unsplash.com"
_IMAGE_PARAMS = "w=800&auto=format&fit=crop&q=60"


def _image(photo_id: str) -> str:
    return f"{_IMAGE_BASE}/{photo_id}?{_IMAGE_PARAMS}"


FLEET: tuple[Vehicle, ...] = (
    Vehicle(
        id="1",
        name="Toyota Alphard",
        vehicle_class=VehicleClass.MPV,
        daily_rate=Decimal("150"),
        capacity=7,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1559416523-140ddc3d238c"),
        featured=True,
    ),
    Vehicle(
        id="2",
        name="Honda CR-V",
        vehicle_class=VehicleClass.SUV,
        daily_rate=Decimal("95"),
        capacity=5,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1568844293986-8c1a5c4fe939"),
        featured=True,
    ),
    Vehicle(
        id="3",
        name="Toyota Innova",
        vehicle_class=VehicleClass.MPV,
        daily_rate=Decimal("85"),
        capacity=7,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1549317661-bd32c8ce0db2"),
        featured=True,
    ),
    Vehicle(
        id="4",
        name="Mitsubishi Pajero",
        vehicle_class=VehicleClass.SUV,
        daily_rate=Decimal("120"),
        capacity=7,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1519641471654-76ce0107ad1b"),
        featured=True,
    ),
    Vehicle(
        id="5",
        name="Hyundai Stargazer",
        vehicle_class=VehicleClass.MPV,
        daily_rate=Decimal("75"),
        capacity=7,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1605559424843-9e4c228bf1c2"),
    ),
    Vehicle(
        id="6",
        name="Mazda CX-5",
        vehicle_class=VehicleClass.SUV,
        daily_rate=Decimal("100"),
        capacity=5,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1606664515524-ed2f786a0bd6"),
    ),
    Vehicle(
        id="7",
        name="Toyota Avanza",
        vehicle_class=VehicleClass.MPV,
        daily_rate=Decimal("55"),
        capacity=7,
        transmission=Transmission.MANUAL,
        image_url=_image("photo-1533473359331-0135ef1b58bf"),
    ),
    Vehicle(
        id="8",
        name="Honda Civic",
        vehicle_class=VehicleClass.SEDAN,
        daily_rate=Decimal("70"),
        capacity=5,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1590362891991-f776e747a588"),
    ),
    Vehicle(
        id="9",
        name="Toyota Camry",
        vehicle_class=VehicleClass.SEDAN,
        daily_rate=Decimal("90"),
        capacity=5,
        transmission=Transmission.AUTOMATIC,
        image_url=_image("photo-1621007947382-bb3c3994e3fb"),
    ),
)
