"""Field value persistence adapters."""

import json
import os

import pytest
import redis

from regulator_calc.application.services import FieldPersistenceService
from regulator_calc.domain.ports import FieldStoreError, InMemoryFieldStore
from regulator_calc.infrastructure import JsonFileFieldStore, RedisFieldStore, build_field_store
from regulator_calc.shared.config import StoreConfig


class FakeRedis:
    """Minimal stand-in for the two client calls the store makes."""

    def __init__(self, fail=False):
        self.data = {}
        self.fail = fail

    def get(self, key):
        if self.fail:
            raise redis.ConnectionError("connection refused")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail:
            raise redis.ConnectionError("connection refused")
        self.data[key] = value


class TestInMemoryStore:
    def test_round_trip(self):
        store = InMemoryFieldStore()
        assert store.get("vin") is None
        store.set("vin", "12")
        assert store.get("vin") == "12"


class TestJsonFileStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "fields.json"
        JsonFileFieldStore(path).set("vout", "-5")

        assert JsonFileFieldStore(path).get("vout") == "-5"
        assert json.loads(path.read_text(encoding="utf-8")) == {"vout": "-5"}

    def test_missing_file_reads_as_empty(self, tmp_path):
        assert JsonFileFieldStore(tmp_path / "absent.json").get("vin") is None

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(FieldStoreError):
            JsonFileFieldStore(path).get("vin")

    def test_failed_write_leaves_no_temp_file(self, tmp_path, monkeypatch):
        def refuse(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", refuse)
        store = JsonFileFieldStore(tmp_path / "fields.json")

        with pytest.raises(FieldStoreError):
            store.set("vin", "12")
        assert list(tmp_path.iterdir()) == []

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(FieldStoreError):
            JsonFileFieldStore(path).get("vin")


class TestRedisStore:
    def test_keys_are_prefixed(self):
        client = FakeRedis()
        store = RedisFieldStore(client, key_prefix="test:")
        store.set("freq", "50")

        assert client.data == {"test:freq": "50"}
        assert store.get("freq") == "50"
        assert store.get("res1") is None

    def test_bytes_are_decoded(self):
        client = FakeRedis()
        client.data["mc34063:iout"] = b"500"
        assert RedisFieldStore(client).get("iout") == "500"

    def test_connection_errors_are_wrapped(self):
        store = RedisFieldStore(FakeRedis(fail=True))
        with pytest.raises(FieldStoreError):
            store.get("vin")
        with pytest.raises(FieldStoreError):
            store.set("vin", "12")


class TestBuildFieldStore:
    def test_memory(self):
        assert isinstance(build_field_store(StoreConfig(backend="memory")), InMemoryFieldStore)

    def test_json(self, tmp_path):
        store = build_field_store(StoreConfig(backend="json", path=tmp_path / "f.json"))
        assert isinstance(store, JsonFileFieldStore)
        assert store.path == tmp_path / "f.json"

    def test_redis(self):
        store = build_field_store(StoreConfig(backend="redis", key_prefix="x:"))
        assert isinstance(store, RedisFieldStore)
        assert store.key_prefix == "x:"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_field_store(StoreConfig(backend="sqlite"))


class TestFieldPersistenceService:
    def test_save_writes_all_fields(self, make_form, step_down_raw):
        store = InMemoryFieldStore()
        step_down_raw.pop("res1")
        FieldPersistenceService(store).save(make_form(step_down_raw))

        assert store.get("vin") == "12"
        assert store.get("res1") == ""

    def test_restore_skips_unsaved_fields(self):
        store = InMemoryFieldStore({"vin": "24", "freq": "100"})
        assert FieldPersistenceService(store).restore() == {"vin": "24", "freq": "100"}

    def test_raw_text_is_kept_verbatim(self, make_form, step_down_raw):
        store = InMemoryFieldStore()
        step_down_raw["vout"] = "not a number"
        service = FieldPersistenceService(store)
        service.save(make_form(step_down_raw))

        assert service.restore()["vout"] == "not a number"
