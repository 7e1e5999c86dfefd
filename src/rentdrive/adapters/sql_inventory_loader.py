"""Loads the inventory from the vehicles table into memory, once."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from rentdrive.adapters.in_memory_inventory_store import InMemoryInventoryStore
from rentdrive.domain.errors import InvalidState
from rentdrive.domain.vehicle import Transmission, Vehicle, VehicleClass
from rentdrive.infra.db.models.vehicle import VehicleRow

logger = logging.getLogger(__name__)


class SqlInventoryLoader:
    """
    Data-loading collaborator for the inventory store.

    - Reads every row ordered by position (store order)
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    - Returns an InMemoryInventoryStore; the database is not consulted again
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def load(self) -> InMemoryInventoryStore:
        """
        Raises:
            InvalidState: If a row holds an unknown vehicle class or transmission,
                or violates the inventory invariants
        """
        rows = self._session.execute(select(VehicleRow).order_by(VehicleRow.position)).scalars()
        vehicles = [self._to_domain(row) for row in rows]

        logger.info("Inventory read from database", extra={"vehicle_count": len(vehicles)})

        return InMemoryInventoryStore(vehicles)

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        try:
            vehicle_class = VehicleClass(row.vehicle_class)
            transmission = Transmission(row.transmission)
        except ValueError as exc:
            raise InvalidState(
                "vehicle row holds an unrecognised enumeration value",
                vehicle_id=row.id,
                detail=str(exc),
            ) from exc

        return Vehicle(
            id=row.id,
            name=row.name,
            vehicle_class=vehicle_class,
            daily_rate=row.daily_rate,  # Already Decimal from NUMERIC column
            capacity=row.capacity,
            transmission=transmission,
            image_url=row.image_url,
            featured=row.featured,
        )
