"""
FastAPI dependencies that hand services to route handlers.

Services are cheap wrappers around the store held on ``app.state``;
one is built per request.
"""

from fastapi import Request

from event_registry_api.app.core.store import RecordStore
from event_registry_api.app.services.account_service import AccountService
from event_registry_api.app.services.event_service import EventService
from event_registry_api.app.services.link_service import LinkService
from event_registry_api.app.services.location_service import LocationService


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_account_service(request: Request) -> AccountService:
    return AccountService(get_store(request), request.app.state.ids)


def get_event_service(request: Request) -> EventService:
    return EventService(get_store(request), request.app.state.ids)


def get_location_service(request: Request) -> LocationService:
    return LocationService(get_store(request), request.app.state.ids)


def get_link_service(request: Request) -> LinkService:
    return LinkService(get_store(request), request.app.state.ids)
