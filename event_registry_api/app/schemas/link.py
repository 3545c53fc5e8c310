"""
Pydantic models for attendance links.

A link records that an account attends an event.  Both ends are plain
foreign keys and are not validated when a link is created or updated.
"""

from typing import Optional

from pydantic import AliasChoices, Field

from .common import RecordModel


class AttendanceLinkBase(RecordModel):
    account_id: Optional[str] = Field(None, examples=["1"])
    event_id: Optional[str] = Field(None, examples=["2"])


class AttendanceLinkCreate(AttendanceLinkBase):
    """Schema for linking an account to an event."""
    pass


class AttendanceLinkUpdate(AttendanceLinkBase):
    """Schema for updating a link; omitted fields are preserved."""
    pass


class AttendanceLink(AttendanceLinkBase):
    id: str
    # Older datasets call the attendee ``user_id``.
    account_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("account_id", "user_id"),
        examples=["1"],
    )
