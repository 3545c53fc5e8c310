"""
Pydantic models for event data.

``Event`` is the stored record.  ``EventCreate`` carries the fields a
caller may supply when creating an event and ``EventUpdate`` is the
patch type: only the fields explicitly present in a request are merged
over the stored record.

``owner_id`` and ``location_id`` are foreign keys into the accounts and
locations collections.  They are stored as given and never checked
against those collections.
"""

from typing import Optional

from pydantic import AliasChoices, Field

from .common import RecordModel


class EventBase(RecordModel):
    title: Optional[str] = Field(None, examples=["Launch party"])
    desc: Optional[str] = Field(None, examples=["Celebrating the first release"])
    date: Optional[str] = Field(None, examples=["2025-09-01"])
    # ``from`` is a Python keyword; the attribute is ``from_`` and the
    # wire name stays ``from``.
    from_: Optional[str] = Field(None, alias="from", examples=["18:00"])
    to: Optional[str] = Field(None, examples=["22:00"])
    location_id: Optional[str] = Field(None, examples=["1"])
    owner_id: Optional[str] = Field(None, examples=["1"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(EventBase):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """
    pass


class Event(EventBase):
    """An event record as stored and returned by the API."""

    id: str
    # Older datasets name the owning account ``user_id``.
    owner_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("owner_id", "user_id"),
        examples=["1"],
    )
