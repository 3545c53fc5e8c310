import itertools

import pytest

from event_registry_api.app.core.dataset import build_store
from event_registry_api.app.core.ids import IdGenerator


SAMPLE_DATA = {
    "accounts": [
        {"id": 1, "username": "alice", "email": "alice@example.com"},
        {"id": 2, "username": "bob", "email": "bob@example.com"},
    ],
    "events": [
        {
            "id": 1,
            "title": "Launch",
            "desc": "Release party",
            "date": "2025-09-01",
            "from": "18:00",
            "to": "22:00",
            "location_id": 1,
            "owner_id": 1,
        },
        {
            "id": 2,
            "title": "Retro",
            "desc": "Sprint retrospective",
            "date": "2025-09-02",
            "from": "10:00",
            "to": "11:00",
            "location_id": 99,
            "owner_id": 42,
        },
    ],
    "locations": [
        {"id": 1, "name": "Main hall", "desc": "Ground floor", "lat": 52.52, "lng": 13.405},
    ],
    "links": [
        {"id": 1, "account_id": 2, "event_id": 1},
        {"id": 2, "account_id": 1, "event_id": 1},
        {"id": 3, "account_id": 2, "event_id": 2},
    ],
}


@pytest.fixture
def store():
    return build_store(SAMPLE_DATA)


@pytest.fixture
def ids():
    counter = itertools.count(1)
    return IdGenerator(lambda: f"gen-{next(counter)}")
