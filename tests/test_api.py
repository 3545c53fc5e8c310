import pytest
from fastapi.testclient import TestClient

from event_registry_api.app.core.config import Settings
from event_registry_api.app.main import create_app


API = "/api/v1"


@pytest.fixture
def client(store, ids):
    app = create_app(store=store, settings=Settings(), ids=ids)
    return TestClient(app)


def test_list_and_get(client):
    resp = client.get(f"{API}/events/")
    assert resp.status_code == 200
    events = resp.json()
    assert [e["id"] for e in events] == ["1", "2"]
    # the Python attribute ``from_`` is exposed as ``from``
    assert events[0]["from"] == "18:00"
    assert "from_" not in events[0]

    resp = client.get(f"{API}/accounts/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": "2", "username": "bob", "email": "bob@example.com"}


@pytest.mark.parametrize("collection", ["accounts", "events", "locations", "links"])
def test_get_unknown_id_is_404(client, collection):
    resp = client.get(f"{API}/{collection}/does-not-exist")
    assert resp.status_code == 404
    assert "does-not-exist" in resp.json()["detail"]


def test_create_event(client):
    resp = client.post(f"{API}/events/", json={"title": "Workshop", "from": "09:00", "owner_id": 2})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == "gen-1"
    assert body["from"] == "09:00"
    assert body["owner_id"] == "2"
    assert body["desc"] is None

    listed = client.get(f"{API}/events/").json()
    assert listed[-1] == body


def test_update_account_merges_fields(client):
    resp = client.put(f"{API}/accounts/1", json={"email": "x"})
    assert resp.status_code == 200
    assert resp.json() == {"id": "1", "username": "alice", "email": "x"}


def test_update_with_null_clears_field(client):
    resp = client.put(f"{API}/events/1", json={"desc": None})
    assert resp.status_code == 200
    assert resp.json()["desc"] is None
    assert resp.json()["title"] == "Launch"


def test_update_unknown_location_is_404(client):
    before = client.get(f"{API}/locations/").json()
    resp = client.put(f"{API}/locations/unknown", json={"name": "Nowhere"})
    assert resp.status_code == 404
    assert client.get(f"{API}/locations/").json() == before


def test_delete_event_by_title(client):
    client.post(f"{API}/events/", json={"title": "Launch"})
    resp = client.delete(f"{API}/events/match", params={"title": "Launch"})
    assert resp.status_code == 200
    assert resp.json()["id"] == "1"
    titles = [e["title"] for e in client.get(f"{API}/events/").json()]
    assert titles == ["Retro", "Launch"]


def test_delete_by_id_and_alternate_keys(client):
    assert client.delete(f"{API}/accounts/match", params={"id": "2"}).json()["username"] == "bob"
    assert client.delete(f"{API}/locations/match", params={"name": "Main hall"}).json()["id"] == "1"
    assert client.delete(f"{API}/links/match", params={"account_id": "1"}).json()["id"] == "2"


def test_delete_without_keys_is_400(client):
    resp = client.delete(f"{API}/accounts/match")
    assert resp.status_code == 400


def test_delete_unknown_is_404(client):
    resp = client.delete(f"{API}/events/match", params={"id": "nope", "title": "nope"})
    assert resp.status_code == 404
    assert len(client.get(f"{API}/events/").json()) == 2


def test_delete_all_links(client):
    resp = client.delete(f"{API}/links/")
    assert resp.status_code == 200
    assert resp.json() == {"count": 3}
    assert client.get(f"{API}/links/").json() == []


def test_event_relationship_routes(client):
    assert client.get(f"{API}/events/1/owner").json()["username"] == "alice"
    assert client.get(f"{API}/events/1/location").json()["name"] == "Main hall"
    attendees = client.get(f"{API}/events/1/attendees").json()
    assert [link["account_id"] for link in attendees] == ["2", "1"]


def test_dangling_owner_is_404(client):
    resp = client.get(f"{API}/events/2/owner")
    assert resp.status_code == 404
    assert "accounts" in resp.json()["detail"]

    assert client.get(f"{API}/events/2/location").status_code == 404
    assert client.get(f"{API}/events/missing/attendees").status_code == 404


def test_attendees_empty_list(client):
    client.delete(f"{API}/links/")
    resp = client.get(f"{API}/events/1/attendees")
    assert resp.status_code == 200
    assert resp.json() == []


def test_info_reports_counts(client):
    body = client.get(f"{API}/info/").json()
    assert body["project"] == "Event Registry API"
    assert body["counts"] == {"accounts": 2, "events": 2, "locations": 1, "links": 3}


def test_store_loaded_at_startup(tmp_path, monkeypatch):
    path = tmp_path / "seed.json"
    path.write_text('{"locations": [{"id": 5, "name": "Roof"}]}', encoding="utf-8")
    monkeypatch.setenv("DATA_PATH", str(path))

    app = create_app(settings=Settings())
    with TestClient(app) as client:
        assert client.get(f"{API}/locations/5").json()["name"] == "Roof"
