"""
Generic create/read/update/delete logic shared by every collection.

``CollectionService`` implements the full operation set once; the
per-collection services only name their collection, record type and
alternate delete key.  All lookups are linear scans over the store in
insertion order.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.errors import RecordNotFoundError
from ..core.ids import IdGenerator
from ..core.store import NOT_FOUND, Collection, RecordStore
from ..schemas.common import DeleteAllResult


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CollectionService(Generic[RecordT]):
    """Queries and mutations over a single collection.

    Subclasses set ``collection``, ``record_type`` and
    ``alternate_key`` (the field a delete may match on instead of
    ``id``).
    """

    collection: Collection
    record_type: Type[RecordT]
    alternate_key: str

    def __init__(self, store: RecordStore, ids: Optional[IdGenerator] = None) -> None:
        self.store = store
        self.ids = ids or IdGenerator()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list(self) -> List[RecordT]:
        """Return every record in insertion order."""
        return self.store.get_all(self.collection)

    def get(self, record_id: str) -> RecordT:
        """Return the record with ``record_id``.

        Raises ``RecordNotFoundError`` when no record matches.
        """
        record = self.store.find_by_id(self.collection, record_id)
        if record is NOT_FOUND:
            raise RecordNotFoundError(self.collection.value, {"id": record_id})
        return record

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, data: BaseModel) -> RecordT:
        """Store a new record built from ``data`` under a fresh id.

        Only the fields present in ``data`` are copied; foreign keys are
        stored as given.
        """
        fields = data.model_dump(exclude_unset=True)
        record = self.record_type(id=self.ids.next(), **fields)
        self.store.append(self.collection, record)
        logger.info("Created %s record %s", self.collection.value, record.id)
        return record

    def update(self, record_id: str, data: BaseModel) -> RecordT:
        """Shallow-merge the fields set on ``data`` over a stored record.

        Fields absent from ``data`` keep their stored values; fields
        present overwrite, including an explicit ``None``.  The stored
        record is replaced by the merged one, which is returned.
        """
        index = self.store.find_index(self.collection, lambda record: record.id == record_id)
        if index is None:
            logger.warning("Update of missing %s record %s", self.collection.value, record_id)
            raise RecordNotFoundError(self.collection.value, {"id": record_id})
        current = self.store.get_at(self.collection, index)
        changes = data.model_dump(exclude_unset=True)
        merged = current.model_copy(update=changes)
        self.store.replace_at(self.collection, index, merged)
        logger.info(
            "Updated %s record %s (%s)",
            self.collection.value,
            record_id,
            ", ".join(sorted(changes)) or "no fields",
        )
        return merged

    def delete(self, record_id: Optional[str] = None, alternate: Optional[Any] = None) -> RecordT:
        """Remove the first record matching ``record_id`` or the alternate key.

        A record matches when its id equals ``record_id`` or its
        ``alternate_key`` field equals ``alternate``.  Arguments left as
        ``None`` match nothing.  When several records match, only the
        first in insertion order is removed.
        """

        def matches(record: Any) -> bool:
            if record_id is not None and record.id == record_id:
                return True
            return alternate is not None and getattr(record, self.alternate_key) == alternate

        index = self.store.find_index(self.collection, matches)
        if index is None:
            keys = {"id": record_id, self.alternate_key: alternate}
            logger.warning("Delete matched no %s record (%s)", self.collection.value, keys)
            raise RecordNotFoundError(self.collection.value, keys)
        removed = self.store.remove_at(self.collection, index)
        logger.info("Deleted %s record %s", self.collection.value, removed.id)
        return removed

    def delete_all(self) -> DeleteAllResult:
        """Clear the collection and report how many records were removed."""
        count = self.store.clear(self.collection)
        logger.info("Deleted all %d %s records", count, self.collection.value)
        return DeleteAllResult(count=count)
