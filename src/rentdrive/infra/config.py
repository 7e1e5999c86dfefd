"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os

INVENTORY_SOURCES = ("builtin", "database")


def inventory_source() -> str:
    """
    Where the inventory is loaded from at startup.

    - builtin (default): the fleet shipped in rentdrive.data.fleet
    - database: the vehicles table at DATABASE_URL, read once
    """
    source = os.getenv("INVENTORY_SOURCE", "builtin").strip().lower()

    if source not in INVENTORY_SOURCES:
        raise RuntimeError(
            f"INVENTORY_SOURCE must be one of {list(INVENTORY_SOURCES)}, got {source!r}"
        )

    return source


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url
