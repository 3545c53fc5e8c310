"""Identifier generation for newly created records."""

import uuid
from typing import Callable, Optional


class IdGenerator:
    """Produce opaque string identifiers.

    Uniqueness relies on the factory alone; the store is never consulted.
    The default factory is ``uuid4``.  Tests may inject a deterministic
    factory, which then carries the same uniqueness obligation.
    """

    def __init__(self, factory: Optional[Callable[[], object]] = None) -> None:
        self._factory = factory or uuid.uuid4

    def next(self) -> str:
        return str(self._factory())
