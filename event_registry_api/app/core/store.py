"""
In-memory record store.

The store keeps four ordered collections (accounts, events, locations
and attendance links) as plain Python lists.  There is no index: every
lookup is a linear scan in insertion order.  Mutating operations act on
the shared lists in place.

The store performs no locking.  It must only ever be driven by one
caller at a time; the HTTP layer guarantees this by running every
service call on the event loop thread (see ``app.main``).
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union


class Collection(str, Enum):
    ACCOUNTS = "accounts"
    EVENTS = "events"
    LOCATIONS = "locations"
    LINKS = "links"


class NotFoundType:
    """Result of a lookup that matched no record.

    Falsy so it can be tested like ``None``, but distinct from it: a
    missing record and a record field that is ``None`` never compare
    equal.
    """

    _instance = None

    def __new__(cls) -> "NotFoundType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFoundType()

Predicate = Callable[[Any], bool]


class RecordStore:
    """Four independent ordered collections of records.

    Records are expected to expose an ``id`` attribute.  Uniqueness of
    ``id`` within a collection is never checked here; it follows from
    identifiers being produced by ``IdGenerator``.
    """

    def __init__(self, initial: Optional[Dict[Collection, Iterable[Any]]] = None) -> None:
        self._collections: Dict[Collection, List[Any]] = {c: [] for c in Collection}
        for collection, records in (initial or {}).items():
            self._collections[Collection(collection)].extend(records)

    def _records(self, collection: Collection) -> List[Any]:
        return self._collections[Collection(collection)]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_all(self, collection: Collection) -> List[Any]:
        """Return a snapshot of the collection in insertion order."""
        return list(self._records(collection))

    def count(self, collection: Collection) -> int:
        return len(self._records(collection))

    def find_one(self, collection: Collection, predicate: Predicate) -> Union[Any, NotFoundType]:
        for record in self._records(collection):
            if predicate(record):
                return record
        return NOT_FOUND

    def find_by_id(self, collection: Collection, record_id: Optional[str]) -> Union[Any, NotFoundType]:
        if record_id is None:
            return NOT_FOUND
        return self.find_one(collection, lambda record: record.id == record_id)

    def find_index(self, collection: Collection, predicate: Predicate) -> Optional[int]:
        """Position of the first record matching ``predicate``, or ``None``."""
        for index, record in enumerate(self._records(collection)):
            if predicate(record):
                return index
        return None

    def get_at(self, collection: Collection, index: int) -> Any:
        return self._records(collection)[index]

    def filter(self, collection: Collection, predicate: Predicate) -> List[Any]:
        return [record for record in self._records(collection) if predicate(record)]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def append(self, collection: Collection, record: Any) -> None:
        self._records(collection).append(record)

    def replace_at(self, collection: Collection, index: int, record: Any) -> None:
        self._records(collection)[index] = record

    def remove_at(self, collection: Collection, index: int) -> Any:
        return self._records(collection).pop(index)

    def clear(self, collection: Collection) -> int:
        """Empty the collection and return how many records it held."""
        records = self._records(collection)
        removed = len(records)
        del records[:]
        return removed
