"""
Account endpoints for API v1.

Queries and mutations over the accounts collection.  An account may be
deleted by ``id`` or by ``username``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from event_registry_api.app.api.v1.deps import get_account_service
from event_registry_api.app.core.errors import RecordNotFoundError
from event_registry_api.app.schemas.account import Account, AccountCreate, AccountUpdate
from event_registry_api.app.schemas.common import DeleteAllResult
from event_registry_api.app.services.account_service import AccountService


router = APIRouter()


@router.get("/", response_model=List[Account])
async def list_accounts(service: AccountService = Depends(get_account_service)) -> List[Account]:
    """Return all accounts in insertion order."""
    return service.list()


@router.get("/{account_id}", response_model=Account)
async def get_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """Retrieve a single account by its ID.  Raises 404 if missing."""
    try:
        return service.get(account_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Account, status_code=status.HTTP_201_CREATED)
async def create_account(
    account: AccountCreate,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """Create an account under a freshly generated ID."""
    return service.create(account)


@router.put("/{account_id}", response_model=Account)
async def update_account(
    account_id: str,
    updates: AccountUpdate,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """Update an existing account.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        return service.update(account_id, updates)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/match", response_model=Account)
async def delete_account(
    record_id: Optional[str] = Query(None, alias="id"),
    username: Optional[str] = Query(None),
    service: AccountService = Depends(get_account_service),
) -> Account:
    """Delete the first account matching ``id`` or ``username``.

    Returns the removed account.
    """
    if record_id is None and username is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Provide id or username")
    try:
        return service.delete(record_id, username)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_accounts(service: AccountService = Depends(get_account_service)) -> DeleteAllResult:
    """Remove every account and report how many were removed."""
    return service.delete_all()
