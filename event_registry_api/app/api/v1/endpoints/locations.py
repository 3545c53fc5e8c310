"""
Location endpoints for API v1.

A location may be deleted by ``id`` or by ``name``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from event_registry_api.app.api.v1.deps import get_location_service
from event_registry_api.app.core.errors import RecordNotFoundError
from event_registry_api.app.schemas.common import DeleteAllResult
from event_registry_api.app.schemas.location import Location, LocationCreate, LocationUpdate
from event_registry_api.app.services.location_service import LocationService


router = APIRouter()


@router.get("/", response_model=List[Location])
async def list_locations(service: LocationService = Depends(get_location_service)) -> List[Location]:
    return service.list()


@router.get("/{location_id}", response_model=Location)
async def get_location(
    location_id: str,
    service: LocationService = Depends(get_location_service),
) -> Location:
    try:
        return service.get(location_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Location, status_code=status.HTTP_201_CREATED)
async def create_location(
    location: LocationCreate,
    service: LocationService = Depends(get_location_service),
) -> Location:
    return service.create(location)


@router.put("/{location_id}", response_model=Location)
async def update_location(
    location_id: str,
    updates: LocationUpdate,
    service: LocationService = Depends(get_location_service),
) -> Location:
    """Merge the supplied fields over an existing location."""
    try:
        return service.update(location_id, updates)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/match", response_model=Location)
async def delete_location(
    record_id: Optional[str] = Query(None, alias="id"),
    name: Optional[str] = Query(None),
    service: LocationService = Depends(get_location_service),
) -> Location:
    """Delete the first location matching ``id`` or ``name``."""
    if record_id is None and name is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Provide id or name")
    try:
        return service.delete(record_id, name)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_locations(service: LocationService = Depends(get_location_service)) -> DeleteAllResult:
    return service.delete_all()
