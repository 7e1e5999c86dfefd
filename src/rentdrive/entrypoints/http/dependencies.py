"""
Dependency injection for FastAPI routes.

Key principle: the inventory is loaded once per process and never mutated,
so it is a stateless singleton behind lru_cache. Use cases are cheap and are
built per request around it.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from rentdrive.adapters.in_memory_inventory_store import InMemoryInventoryStore
from rentdrive.adapters.sql_inventory_loader import SqlInventoryLoader
from rentdrive.data.fleet import FLEET
from rentdrive.infra.config import inventory_source
from rentdrive.infra.db.session import get_session
from rentdrive.ports.inventory_store import InventoryStore
from rentdrive.use_cases.get_catalog_facets import GetCatalogFacets
from rentdrive.use_cases.get_vehicle_by_id import GetVehicleById
from rentdrive.use_cases.list_featured_vehicles import ListFeaturedVehicles
from rentdrive.use_cases.query_catalog import QueryCatalog
from rentdrive.use_cases.submit_booking_request import SubmitBookingRequest

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_inventory_store() -> InventoryStore:
    """
    Loads the inventory on first use and returns the same store afterwards.

    The source is chosen by INVENTORY_SOURCE (see rentdrive.infra.config).
    Call get_inventory_store.cache_clear() to force a reload (tests only).
    """
    source = inventory_source()
    logger.info("Loading inventory", extra={"source": source})

    if source == "database":
        with get_session() as session:
            return SqlInventoryLoader(session).load()

    return InMemoryInventoryStore(FLEET)


def get_query_catalog_use_case(
    store: InventoryStore = Depends(get_inventory_store),
) -> QueryCatalog:
    return QueryCatalog(inventory_store=store)


def get_get_vehicle_by_id_use_case(
    store: InventoryStore = Depends(get_inventory_store),
) -> GetVehicleById:
    return GetVehicleById(inventory_store=store)


def get_list_featured_vehicles_use_case(
    store: InventoryStore = Depends(get_inventory_store),
) -> ListFeaturedVehicles:
    return ListFeaturedVehicles(inventory_store=store)


def get_catalog_facets_use_case(
    store: InventoryStore = Depends(get_inventory_store),
) -> GetCatalogFacets:
    return GetCatalogFacets(inventory_store=store)


def get_submit_booking_request_use_case(
    store: InventoryStore = Depends(get_inventory_store),
) -> SubmitBookingRequest:
    return SubmitBookingRequest(inventory_store=store)
