import json

import pytest
from pydantic import ValidationError

from event_registry_api.app.core.dataset import build_store, load_dataset, resolve_data_path
from event_registry_api.app.core.store import Collection


def test_build_store_coerces_ids_and_aliases(store):
    launch = store.find_by_id(Collection.EVENTS, "1")
    assert launch.from_ == "18:00"
    assert launch.location_id == "1"
    assert launch.owner_id == "1"
    assert store.find_by_id(Collection.LOCATIONS, "1").lat == 52.52


def test_legacy_keys_are_accepted():
    store = build_store(
        {
            "users": [{"id": 7, "username": "legacy", "email": "l@example.com"}],
            "events": [{"id": 1, "title": "Old", "user_id": 7}],
            "participants": [{"id": 1, "user_id": 7, "event_id": 1}],
        }
    )
    assert store.find_by_id(Collection.ACCOUNTS, "7").username == "legacy"
    assert store.find_by_id(Collection.EVENTS, "1").owner_id == "7"
    assert store.find_by_id(Collection.LINKS, "1").account_id == "7"
    assert store.count(Collection.LOCATIONS) == 0


def test_load_dataset_from_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"accounts": [{"id": "a", "username": "x"}]}), encoding="utf-8")

    store = load_dataset(str(path))

    assert store.count(Collection.ACCOUNTS) == 1
    assert store.count(Collection.EVENTS) == 0


def test_missing_dataset_gives_empty_store(tmp_path):
    store = load_dataset(str(tmp_path / "absent.json"))
    assert all(store.count(c) == 0 for c in Collection)


def test_malformed_dataset_raises(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_dataset(str(broken))

    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"accounts": [{"username": "no id"}]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_dataset(str(invalid))


def test_relative_path_resolves_to_project_root():
    path = resolve_data_path("data.json")
    assert path.is_absolute()
    assert path.name == "data.json"
    assert (path.parent / "event_registry_api").is_dir()


def test_bundled_dataset_loads():
    store = load_dataset("data.json")
    assert store.count(Collection.ACCOUNTS) == 3
    assert store.count(Collection.EVENTS) == 3
    assert store.find_by_id(Collection.EVENTS, "1").title == "Launch"
