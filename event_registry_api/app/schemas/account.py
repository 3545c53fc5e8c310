"""
Pydantic models for account data.

Accounts are referenced by ``Event.owner_id`` and
``AttendanceLink.account_id``.  ``username`` doubles as the alternate
key for deletes.
"""

from typing import Optional

from pydantic import Field

from .common import RecordModel


class AccountBase(RecordModel):
    username: Optional[str] = Field(None, examples=["alice"])
    email: Optional[str] = Field(None, examples=["alice@example.com"])


class AccountCreate(AccountBase):
    """Schema for registering an account."""
    pass


class AccountUpdate(AccountBase):
    """Schema for updating an account; omitted fields are preserved."""
    pass


class Account(AccountBase):
    """Schema for reading an account from the API."""

    id: str
