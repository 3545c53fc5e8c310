"""Event Registry API client.

A thin wrapper around the HTTP API served by ``event_registry_api``.
Every collection (``accounts``, ``events``, ``locations``, ``links``)
supports the same operations:

* :meth:`EventRegistryClient.list` – every record in the collection.
* :meth:`EventRegistryClient.get` – a single record by id.
* :meth:`EventRegistryClient.create` – create a record from a field dict.
* :meth:`EventRegistryClient.update` – merge fields over a record.
* :meth:`EventRegistryClient.delete` – remove a record by id or alternate key.
* :meth:`EventRegistryClient.delete_all` – clear the collection.

Events additionally expose their owner, location and attendees.

All methods return a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  A missing record shows up
as ``status_code == 404``.  The client uses the ``requests`` library.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Field each collection's delete may match on instead of ``id``.
ALTERNATE_KEYS: Dict[str, str] = {
    "accounts": "username",
    "events": "title",
    "locations": "name",
    "links": "account_id",
}


class EventRegistryClient:
    """Client for the Event Registry HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:4000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/events/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in ALTERNATE_KEYS:
            raise ValueError(f"Unknown collection {collection!r}")

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------
    def list(self, collection: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        self._check_collection(collection)
        data, error = self._request("GET", f"/{collection}/")
        if error:
            return [], error
        return data or [], None

    def get(self, collection: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        self._check_collection(collection)
        return self._request("GET", f"/{collection}/{record_id}")

    def create(self, collection: str, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record; the server assigns its id."""
        self._check_collection(collection)
        return self._request("POST", f"/{collection}/", json_body=fields)

    def update(
        self, collection: str, record_id: Any, fields: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``fields`` over the record; other fields are left unchanged."""
        self._check_collection(collection)
        return self._request("PUT", f"/{collection}/{record_id}", json_body=fields)

    def delete(
        self, collection: str, record_id: Any = None, alternate: Any = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete the first record matching ``record_id`` or the alternate key.

        The alternate key is ``username`` for accounts, ``title`` for
        events, ``name`` for locations and ``account_id`` for links.
        Returns the removed record.
        """
        self._check_collection(collection)
        params: Dict[str, Any] = {}
        if record_id is not None:
            params["id"] = record_id
        if alternate is not None:
            params[ALTERNATE_KEYS[collection]] = alternate
        return self._request("DELETE", f"/{collection}/match", params=params)

    def delete_all(self, collection: str) -> Tuple[Optional[int], Optional[Error]]:
        """Clear the collection; returns the number of removed records."""
        self._check_collection(collection)
        data, error = self._request("DELETE", f"/{collection}/")
        if error:
            return None, error
        return data.get("count"), None

    # ------------------------------------------------------------------
    # Event relationships
    # ------------------------------------------------------------------
    def get_event_owner(self, event_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/events/{event_id}/owner")

    def get_event_location(self, event_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/events/{event_id}/location")

    def get_event_attendees(self, event_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/events/{event_id}/attendees")
        if error:
            return [], error
        return data or [], None
