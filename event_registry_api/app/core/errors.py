"""
Typed failures raised by the service layer.

A lookup that matches nothing is not an ordinary return value: the
services raise ``RecordNotFoundError`` and the HTTP layer turns it into
a ``404`` response.
"""

from typing import Any, Dict, Optional


class RecordNotFoundError(LookupError):
    """No record in ``collection`` matched the given keys."""

    def __init__(self, collection: str, keys: Optional[Dict[str, Any]] = None) -> None:
        self.collection = collection
        self.keys = {k: v for k, v in (keys or {}).items() if v is not None}
        if self.keys:
            described = ", ".join(f"{k}={v!r}" for k, v in self.keys.items())
            message = f"No record in {collection} matching {described}"
        else:
            message = f"No record in {collection} matching an empty key"
        super().__init__(message)
