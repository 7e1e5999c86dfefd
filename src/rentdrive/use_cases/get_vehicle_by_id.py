"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from rentdrive.domain.errors import NotFoundError, ValidationError
from rentdrive.domain.vehicle import Vehicle
from rentdrive.ports.inventory_store import InventoryStore


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Reject blank ids (ids are otherwise opaque)
    - Delegate to the inventory store
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, inventory_store: InventoryStore) -> None:
        self._inventory_store = inventory_store

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Raises:
            ValidationError: If vehicle_id is blank
            NotFoundError: If no vehicle has the given ID
        """
        if not request.vehicle_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        vehicle = self._inventory_store.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
