"""
Event endpoints for API v1.

These routes provide queries and mutations for events, plus the
event's related records.  The owner, location and attendees are only
looked up when their route is requested; fetching an event never
touches the other collections.  An event may be deleted by ``id`` or
by ``title``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from event_registry_api.app.api.v1.deps import get_event_service
from event_registry_api.app.core.errors import RecordNotFoundError
from event_registry_api.app.schemas.account import Account
from event_registry_api.app.schemas.common import DeleteAllResult
from event_registry_api.app.schemas.event import Event, EventCreate, EventUpdate
from event_registry_api.app.schemas.link import AttendanceLink
from event_registry_api.app.schemas.location import Location
from event_registry_api.app.services.event_service import EventService


router = APIRouter()


@router.get("/", response_model=List[Event])
async def list_events(service: EventService = Depends(get_event_service)) -> List[Event]:
    """Return all events in insertion order."""
    return service.list()


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: str, service: EventService = Depends(get_event_service)) -> Event:
    """Retrieve a single event by its ID.  Raises 404 if missing."""
    try:
        return service.get(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    service: EventService = Depends(get_event_service),
) -> Event:
    """Create a new event.

    ``owner_id`` and ``location_id`` are stored as given; they need not
    reference existing records.
    """
    return service.create(event)


@router.put("/{event_id}", response_model=Event)
async def update_event(
    event_id: str,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> Event:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged and fields sent as ``null`` are cleared.
    """
    try:
        return service.update(event_id, updates)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/match", response_model=Event)
async def delete_event(
    record_id: Optional[str] = Query(None, alias="id"),
    title: Optional[str] = Query(None),
    service: EventService = Depends(get_event_service),
) -> Event:
    """Delete the first event matching ``id`` or ``title``.

    When several events share the title, the earliest created one is
    removed.  Returns the removed event.
    """
    if record_id is None and title is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Provide id or title")
    try:
        return service.delete(record_id, title)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_events(service: EventService = Depends(get_event_service)) -> DeleteAllResult:
    """Remove every event.  Links pointing at them are left in place."""
    return service.delete_all()


@router.get("/{event_id}/owner", response_model=Account)
async def get_event_owner(event_id: str, service: EventService = Depends(get_event_service)) -> Account:
    """Return the account referenced by the event's ``owner_id``.

    Raises 404 when the event is missing or its owner does not exist.
    """
    try:
        return service.get_owner(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{event_id}/location", response_model=Location)
async def get_event_location(event_id: str, service: EventService = Depends(get_event_service)) -> Location:
    try:
        return service.get_location(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{event_id}/attendees", response_model=List[AttendanceLink])
async def list_event_attendees(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> List[AttendanceLink]:
    """List the attendance links of an event (empty if none)."""
    try:
        return service.get_attendees(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
