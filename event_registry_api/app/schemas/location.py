"""
Pydantic models for location data.
"""

from typing import Optional

from pydantic import Field

from .common import RecordModel


class LocationBase(RecordModel):
    name: Optional[str] = Field(None, examples=["Main hall"])
    desc: Optional[str] = Field(None, examples=["Ground floor, east wing"])
    lat: Optional[float] = Field(None, examples=[52.52])
    lng: Optional[float] = Field(None, examples=[13.405])


class LocationCreate(LocationBase):
    pass


class LocationUpdate(LocationBase):
    """Patch for a location; only supplied fields are changed."""
    pass


class Location(LocationBase):
    id: str
