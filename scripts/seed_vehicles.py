#!/usr/bin/env python3
"""
Seed the vehicles table with the built-in RentDrive fleet.

Features:
- Idempotent: safe to run multiple times (clears before seeding)
- Creates the vehicles table if it does not exist
- Preserves fleet order in the position column (catalog tie-break)

Usage:
    DATABASE_URL=sqlite:///rentdrive.db python scripts/seed_vehicles.py
    # then serve from the database:
    INVENTORY_SOURCE=database DATABASE_URL=sqlite:///rentdrive.db uvicorn rentdrive.entrypoints.http.app:app
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rentdrive.data.fleet import FLEET
from rentdrive.infra.db.models.base import Base
from rentdrive.infra.db.models.vehicle import VehicleRow
from rentdrive.infra.db.session import get_engine, get_session


def seed_vehicles() -> None:
    print(f"🌱 Seeding database with {len(FLEET)} vehicles...")

    Base.metadata.create_all(get_engine())

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing vehicles...")
        deleted_count = session.query(VehicleRow).delete()
        print(f"   Deleted {deleted_count} existing vehicles")

        # Step 2: Insert the fleet in store order
        rows = [VehicleRow.from_domain(vehicle, position) for position, vehicle in enumerate(FLEET)]
        session.add_all(rows)
        session.flush()

        print(f"✅ Successfully seeded {len(rows)} vehicles!")
        for row in rows:
            print(f"   {row.position + 1}. {row.name} ({row.vehicle_class}) - ${row.daily_rate}/day")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
