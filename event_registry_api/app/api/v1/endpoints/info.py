"""
Information endpoint for API v1.

Returns the service name and version together with the current number
of records in each collection.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from event_registry_api.app.api.v1.deps import get_store
from event_registry_api.app.core.store import Collection, RecordStore

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(request: Request, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    settings = request.app.state.settings
    counts = {collection.value: store.count(collection) for collection in Collection}
    return {"project": settings.project_name, "version": settings.api_version, "counts": counts}
