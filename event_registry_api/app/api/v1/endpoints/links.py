"""
Attendance link endpoints for API v1.

Links connect an account to an event.  Neither end is validated when a
link is written.  A link may be deleted by ``id`` or by ``account_id``;
with ``account_id`` only that account's first link is removed.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from event_registry_api.app.api.v1.deps import get_link_service
from event_registry_api.app.core.errors import RecordNotFoundError
from event_registry_api.app.schemas.common import DeleteAllResult
from event_registry_api.app.schemas.link import AttendanceLink, AttendanceLinkCreate, AttendanceLinkUpdate
from event_registry_api.app.services.link_service import LinkService


router = APIRouter()


@router.get("/", response_model=List[AttendanceLink])
async def list_links(service: LinkService = Depends(get_link_service)) -> List[AttendanceLink]:
    return service.list()


@router.get("/{link_id}", response_model=AttendanceLink)
async def get_link(link_id: str, service: LinkService = Depends(get_link_service)) -> AttendanceLink:
    try:
        return service.get(link_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=AttendanceLink, status_code=status.HTTP_201_CREATED)
async def create_link(
    link: AttendanceLinkCreate,
    service: LinkService = Depends(get_link_service),
) -> AttendanceLink:
    return service.create(link)


@router.put("/{link_id}", response_model=AttendanceLink)
async def update_link(
    link_id: str,
    updates: AttendanceLinkUpdate,
    service: LinkService = Depends(get_link_service),
) -> AttendanceLink:
    try:
        return service.update(link_id, updates)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/match", response_model=AttendanceLink)
async def delete_link(
    record_id: Optional[str] = Query(None, alias="id"),
    account_id: Optional[str] = Query(None),
    service: LinkService = Depends(get_link_service),
) -> AttendanceLink:
    if record_id is None and account_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Provide id or account_id")
    try:
        return service.delete(record_id, account_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_links(service: LinkService = Depends(get_link_service)) -> DeleteAllResult:
    return service.delete_all()
