"""
Business logic for events.

Besides the shared collection operations, an event's related records
(owner, location, attendees) are resolved through
``RelationshipService``; ``EventService`` exposes them by event id.
"""

from typing import List, Optional

from ..core.errors import RecordNotFoundError
from ..core.ids import IdGenerator
from ..core.store import NOT_FOUND, Collection, RecordStore
from ..schemas.account import Account
from ..schemas.event import Event
from ..schemas.link import AttendanceLink
from ..schemas.location import Location
from .base import CollectionService
from .relationship_service import RelationshipService


class EventService(CollectionService[Event]):
    """Events; deletes may match on ``title`` instead of ``id``."""

    collection = Collection.EVENTS
    record_type = Event
    alternate_key = "title"

    def __init__(self, store: RecordStore, ids: Optional[IdGenerator] = None) -> None:
        super().__init__(store, ids)
        self.relationships = RelationshipService(store)

    def get_owner(self, event_id: str) -> Account:
        """Return the account owning the event.

        Raises ``RecordNotFoundError`` for an unknown event and for an
        ``owner_id`` that references no account.
        """
        event = self.get(event_id)
        owner = self.relationships.owner(event)
        if owner is NOT_FOUND:
            raise RecordNotFoundError(Collection.ACCOUNTS.value, {"id": event.owner_id})
        return owner

    def get_location(self, event_id: str) -> Location:
        event = self.get(event_id)
        location = self.relationships.location(event)
        if location is NOT_FOUND:
            raise RecordNotFoundError(Collection.LOCATIONS.value, {"id": event.location_id})
        return location

    def get_attendees(self, event_id: str) -> List[AttendanceLink]:
        """Return the event's attendance links; empty when it has none."""
        return self.relationships.attendees(self.get(event_id))
