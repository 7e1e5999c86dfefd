from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from rentdrive.domain.vehicle import Vehicle
from rentdrive.infra.db.models.base import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Store order; the catalog's tie-break within a vehicle class
    position: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    vehicle_class: Mapped[str] = mapped_column(String(20), nullable=False)
    daily_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False
    )  # $99,999,999.99 per day
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    transmission: Mapped[str] = mapped_column(String(20), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    @classmethod
    def from_domain(cls, vehicle: Vehicle, position: int) -> VehicleRow:
        return cls(
            id=vehicle.id,
            position=position,
            name=vehicle.name,
            vehicle_class=vehicle.vehicle_class.value,
            daily_rate=vehicle.daily_rate,
            capacity=vehicle.capacity,
            transmission=vehicle.transmission.value,
            image_url=vehicle.image_url,
            featured=vehicle.featured,
        )
