import json

import pytest

from collective.database.storage import DynamoCollectionStorage, MemoryStorage
from collective.services.entity_store import (
    EVENTS,
    LOCATIONS,
    MAKEUP_ARTISTS,
    RESOURCES,
    THEME_PLANS,
    EntityStore,
)


def test_missing_keys_load_seed_data(store):
    assert len(store.events) == 1
    assert [r.id for r in store.resources] == ["101", "102"]
    assert [p.month for p in store.theme_plans] == [1]
    assert store.locations == []
    assert store.makeup_artists == []


def test_seed_resources_start_unbooked(store):
    for resource in store.resources:
        assert resource.bookedDates == set()
        assert resource.availableQuantity == resource.totalQuantity


def test_empty_array_loads_empty():
    storage = MemoryStorage({"gf_events": "[]", "gf_resources": "[]"})
    store = EntityStore(storage)

    assert store.events == []
    assert store.resources == []


def test_corrupt_json_falls_back_to_seed():
    storage = MemoryStorage({"gf_resources": "{not json"})
    store = EntityStore(storage)

    assert [r.id for r in store.resources] == ["101", "102"]


def test_invalid_records_fall_back_to_seed():
    storage = MemoryStorage({"gf_themes": json.dumps([{"month": 13, "themes": []}])})
    store = EntityStore(storage)

    assert [p.month for p in store.theme_plans] == [1]


def test_replace_saves_only_touched_collection(store, memory_storage):
    store.replace(LOCATIONS, [])

    assert memory_storage.items == {"gf_locations": "[]"}


def test_saved_state_wins_on_next_load(store, memory_storage):
    resource = store.resources[0].model_copy(
        update={"bookedDates": {"2024-03-10", "2024-03-09"}}
    )
    store.replace(RESOURCES, [resource])

    reloaded = EntityStore(memory_storage)

    assert [r.id for r in reloaded.resources] == [resource.id]
    assert reloaded.resources[0].bookedDates == {"2024-03-09", "2024-03-10"}
    # Untouched collections still come from the seed
    assert len(reloaded.events) == 1


def test_booked_dates_persist_as_sorted_array(store, memory_storage):
    resource = store.resources[0].model_copy(
        update={"bookedDates": {"2024-03-10", "2024-03-09"}}
    )
    store.replace(RESOURCES, [resource])

    data = json.loads(memory_storage.items["gf_resources"])
    assert data[0]["bookedDates"] == ["2024-03-09", "2024-03-10"]


def test_observers_are_notified_after_save(store):
    seen = []
    store.subscribe(lambda name, items: seen.append((name, len(items))))

    store.replace(MAKEUP_ARTISTS, [])
    store.replace(EVENTS, [])

    assert seen == [(MAKEUP_ARTISTS, 0), (EVENTS, 0)]


def test_get_returns_copy(store):
    events = store.get(EVENTS)
    events.clear()

    assert len(store.events) == 1


def test_unknown_collection_is_rejected(store):
    with pytest.raises(KeyError):
        store.get("users")


def test_storage_read_failure_falls_back_to_seed():
    class BrokenStorage(MemoryStorage):
        def get(self, key):
            raise Exception("disk unavailable")

    store = EntityStore(BrokenStorage())

    assert len(store.resources) == 2
    assert store.theme_plans[0].month == 1


def test_file_storage_round_trip(file_storage):
    store = EntityStore(file_storage)
    store.replace(THEME_PLANS, [])

    assert (file_storage.directory / "gf_themes.json").read_text() == "[]"
    assert EntityStore(file_storage).theme_plans == []


def test_file_storage_missing_file(file_storage):
    assert file_storage.get("gf_events") is None


def test_dynamodb_storage_round_trip(dynamodb_resource):
    storage = DynamoCollectionStorage(dynamodb_resource, "CollectiveApp_Test")
    store = EntityStore(storage)
    store.replace(EVENTS, [])

    table = dynamodb_resource.Table("CollectiveApp_Test")
    item = table.items[("COLLECTION#gf_events", "SNAPSHOT")]
    assert item["payload"] == "[]"
    assert item["collection"] == "gf_events"

    reloaded = EntityStore(DynamoCollectionStorage(dynamodb_resource, "CollectiveApp_Test"))
    assert reloaded.events == []
    assert len(reloaded.resources) == 2


def test_build_storage_defaults_to_files(monkeypatch, tmp_path):
    from collective.database.storage import JsonFileStorage
    from collective.dependencies import build_storage

    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "store"))

    storage = build_storage()

    assert isinstance(storage, JsonFileStorage)
    assert storage.directory == tmp_path / "store"


def test_build_storage_rejects_unknown_backend(monkeypatch):
    from collective.dependencies import build_storage

    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")

    with pytest.raises(ValueError):
        build_storage()


@pytest.mark.parametrize(
    "total,available",
    [(0, 7), (2, 3), (2, -1)],
)
def test_resource_quantity_invariants_fall_back_to_seed(store, total, available):
    record = store.resources[0].model_dump(mode="json")
    record.update({"totalQuantity": total, "availableQuantity": available})
    storage = MemoryStorage({"gf_resources": json.dumps([record])})

    reloaded = EntityStore(storage)

    assert [r.id for r in reloaded.resources] == ["101", "102"]
    for resource in reloaded.resources:
        assert 1 <= resource.totalQuantity
        assert 0 <= resource.availableQuantity <= resource.totalQuantity


def test_failed_save_keeps_previous_snapshot():
    class FullDiskStorage(MemoryStorage):
        def put(self, key, value):
            raise OSError("disk full")

    store = EntityStore(FullDiskStorage())
    seen = []
    store.subscribe(lambda name, items: seen.append(name))

    with pytest.raises(OSError):
        store.replace(EVENTS, [])

    assert len(store.events) == 1
    assert seen == []


def test_failed_save_is_reported_by_api(client):
    class FullDiskStorage(MemoryStorage):
        def put(self, key, value):
            raise OSError("disk full")

    client.app.state.store = EntityStore(FullDiskStorage())

    response = client.delete("/resources/101")

    assert response.status_code == 500
    assert [r["id"] for r in client.get("/resources/").json()] == ["101", "102"]


def test_dynamodb_settings_from_environment(monkeypatch):
    from collective import config

    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:9000")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-southeast-1")
    monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)

    settings = config.dynamodb_settings()

    assert settings["endpoint_url"] == "http://localhost:9000"
    assert settings["region_name"] == "ap-southeast-1"
    assert settings["aws_access_key_id"] == "fake"
