"""
Top-level router for version 1 of the API.

This router aggregates the per-collection routers under a unified
prefix.  When a new collection is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import accounts, events, info, links, locations

# Create a router for version 1 and include sub-routers for each collection.
router = APIRouter()

router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])
router.include_router(links.router, prefix="/links", tags=["links"])
router.include_router(info.router, prefix="/info", tags=["info"])
