"""
Resolution of an event's related records.

Each lookup is an independent linear scan over the target collection;
nothing is cached, so resolving the same event twice scans twice.  The
resolver only reads from the store.  A foreign key that references no
record yields ``NOT_FOUND`` rather than an exception.
"""

from typing import List, Union

from ..core.store import Collection, NotFoundType, RecordStore
from ..schemas.account import Account
from ..schemas.event import Event
from ..schemas.link import AttendanceLink
from ..schemas.location import Location


class RelationshipService:

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def owner(self, event: Event) -> Union[Account, NotFoundType]:
        """Account whose id equals ``event.owner_id``."""
        return self.store.find_by_id(Collection.ACCOUNTS, event.owner_id)

    def location(self, event: Event) -> Union[Location, NotFoundType]:
        """Location whose id equals ``event.location_id``."""
        return self.store.find_by_id(Collection.LOCATIONS, event.location_id)

    def attendees(self, event: Event) -> List[AttendanceLink]:
        """Links whose ``event_id`` equals the event's id, in insertion order."""
        return self.store.filter(Collection.LINKS, lambda link: link.event_id == event.id)
