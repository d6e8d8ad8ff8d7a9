"""Tests for the key-value storage backends."""

import asyncio
import json

import pytest

from golden_tiger.services.storage import (
    InMemoryKeyValueStore,
    InvalidKeyError,
    JsonFileKeyValueStore,
    SerializationError,
    StorageError,
)


@pytest.fixture
def file_store(tmp_path):
    return JsonFileKeyValueStore(data_dir=tmp_path / "data", write_retry_attempts=3)


class TestJsonFileStore:
    """Tests for JsonFileKeyValueStore."""

    def test_missing_key_reads_none(self, file_store):
        assert asyncio.run(file_store.get("goals")) is None

    def test_round_trip(self, file_store):
        """Test numbers, strings, booleans and nested values round-trip."""
        value = [{"id": "a", "amount": 12.5, "years": 3, "notes": "ünïcode", "flag": True}]
        asyncio.run(file_store.set("portfolio", value))
        assert asyncio.run(file_store.get("portfolio")) == value

    def test_file_is_human_readable_json(self, file_store):
        asyncio.run(file_store.set("onboardingComplete", True))
        path = file_store.data_dir / "onboardingComplete.json"
        assert json.loads(path.read_text(encoding="utf-8")) is True

    def test_overwrite_leaves_no_temp_files(self, file_store):
        asyncio.run(file_store.set("goals", [1]))
        asyncio.run(file_store.set("goals", [1, 2]))
        assert asyncio.run(file_store.get("goals")) == [1, 2]
        assert [p.name for p in file_store.data_dir.iterdir()] == ["goals.json"]

    def test_remove(self, file_store):
        asyncio.run(file_store.set("goals", []))
        asyncio.run(file_store.remove("goals"))
        asyncio.run(file_store.remove("goals"))
        assert asyncio.run(file_store.get("goals")) is None

    def test_clear_removes_every_slot_only(self, file_store):
        """Test clear wipes slots but leaves unrelated files alone."""
        asyncio.run(file_store.set("goals", []))
        asyncio.run(file_store.set("portfolio", []))
        other = file_store.data_dir / "README.txt"
        other.write_text("keep me")

        asyncio.run(file_store.clear())

        assert asyncio.run(file_store.get_all_keys()) == []
        assert other.exists()

    def test_get_all_keys(self, file_store):
        asyncio.run(file_store.set("simulations", []))
        asyncio.run(file_store.set("goals", []))
        assert asyncio.run(file_store.get_all_keys()) == ["goals", "simulations"]

    def test_invalid_key_rejected(self, file_store):
        with pytest.raises(InvalidKeyError):
            asyncio.run(file_store.set("../escape", 1))

    def test_corrupt_file_raises_serialization_error(self, file_store):
        file_store.data_dir.mkdir(parents=True)
        (file_store.data_dir / "goals.json").write_text("{not json")
        with pytest.raises(SerializationError):
            asyncio.run(file_store.get("goals"))

    def test_unserializable_value(self, file_store):
        with pytest.raises(SerializationError):
            asyncio.run(file_store.set("goals", [object()]))

    def test_transient_write_error_is_retried(self, file_store, monkeypatch):
        """Test a single OSError is retried and the write lands."""
        original = file_store._write_atomic
        calls = []

        def flaky(path, text):
            calls.append(path)
            if len(calls) == 1:
                raise OSError("device busy")
            original(path, text)

        monkeypatch.setattr(file_store, "_write_atomic", flaky)
        asyncio.run(file_store.set("goals", [1]))

        assert len(calls) == 2
        assert asyncio.run(file_store.get("goals")) == [1]

    def test_persistent_write_error_raises_storage_error(self, file_store, monkeypatch):
        def broken(path, text):
            raise OSError("read-only file system")

        monkeypatch.setattr(file_store, "_write_atomic", broken)
        with pytest.raises(StorageError):
            asyncio.run(file_store.set("goals", [1]))


class TestInMemoryStore:
    """Tests for InMemoryKeyValueStore."""

    def test_values_are_copies(self):
        """Test mutating a read value does not change the stored one."""
        store = InMemoryKeyValueStore()
        asyncio.run(store.set("goals", [{"id": "a"}]))
        value = asyncio.run(store.get("goals"))
        value.append({"id": "b"})
        assert asyncio.run(store.get("goals")) == [{"id": "a"}]

    def test_raw_text(self):
        store = InMemoryKeyValueStore()
        asyncio.run(store.set("onboardingComplete", True))
        assert store.raw("onboardingComplete") == "true"

    def test_nan_is_not_serializable(self):
        store = InMemoryKeyValueStore()
        with pytest.raises(SerializationError):
            asyncio.run(store.set("goals", [float("nan")]))

    def test_clear(self):
        store = InMemoryKeyValueStore({"goals": "[]", "portfolio": "[]"})
        asyncio.run(store.clear())
        assert asyncio.run(store.get_all_keys()) == []
