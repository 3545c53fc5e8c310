"""
Loading of the initial dataset.

The record store is seeded once at startup from a JSON document of the
form::

    {
        "accounts": [{"id": 1, "username": "...", "email": "..."}],
        "events": [...],
        "locations": [...],
        "links": [...]
    }

The older key names ``users`` (for accounts) and ``participants`` (for
links) are accepted as well.  Every record is validated through its
schema, so integer ids become strings.  Foreign keys are not checked.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple, Type

from pydantic import BaseModel

from ..schemas.account import Account
from ..schemas.event import Event
from ..schemas.link import AttendanceLink
from ..schemas.location import Location
from .store import Collection, RecordStore


logger = logging.getLogger(__name__)

# collection -> (record type, accepted top-level keys)
_SOURCES: Dict[Collection, Tuple[Type[BaseModel], Tuple[str, ...]]] = {
    Collection.ACCOUNTS: (Account, ("accounts", "users")),
    Collection.EVENTS: (Event, ("events",)),
    Collection.LOCATIONS: (Location, ("locations",)),
    Collection.LINKS: (AttendanceLink, ("links", "participants")),
}


def resolve_data_path(data_path: str) -> Path:
    """Resolve ``data_path`` against the project root unless absolute."""
    if os.path.isabs(data_path):
        return Path(data_path)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / data_path).resolve()


def build_store(data: Dict[str, Any]) -> RecordStore:
    """Validate raw collections from ``data`` into a new ``RecordStore``."""
    initial: Dict[Collection, List[BaseModel]] = {}
    for collection, (record_type, keys) in _SOURCES.items():
        raw: List[Dict[str, Any]] = []
        for key in keys:
            raw.extend(data.get(key) or [])
        initial[collection] = [record_type.model_validate(item) for item in raw]
    return RecordStore(initial)


def load_dataset(data_path: str) -> RecordStore:
    """Read the dataset at ``data_path`` and return a populated store.

    A missing file yields an empty store.  Malformed JSON or records
    that fail validation propagate as ``ValueError`` (``json`` and
    ``pydantic`` errors both derive from it).
    """
    path = resolve_data_path(data_path)
    if not path.exists():
        logger.warning("Dataset %s not found; starting with an empty store", path)
        return RecordStore()

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    store = build_store(data)
    logger.info(
        "Loaded dataset %s (%s)",
        path,
        ", ".join(f"{c.value}={store.count(c)}" for c in Collection),
    )
    return store
