"""Tests for key/value stores."""

import json

from readme_forge.store import CREDENTIAL_KEY, JsonFileStore, MemoryStore


class TestMemoryStore:
    def test_get_missing(self):
        assert MemoryStore().get("nope") is None

    def test_set_overwrites(self):
        store = MemoryStore({"a": "1"})

        store.set("a", "2")

        assert store.get("a") == "2"


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / "storage.json")

        assert store.get(CREDENTIAL_KEY) is None

    def test_set_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "storage.json"
        store = JsonFileStore(path)

        store.set(CREDENTIAL_KEY, "gsk_123")

        assert path.exists()
        assert json.loads(path.read_text()) == {CREDENTIAL_KEY: "gsk_123"}

    def test_value_survives_new_instance(self, tmp_path):
        path = tmp_path / "storage.json"
        JsonFileStore(path).set(CREDENTIAL_KEY, "gsk_123")

        assert JsonFileStore(path).get(CREDENTIAL_KEY) == "gsk_123"

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"theme": "dark"}))
        store = JsonFileStore(path)

        store.set(CREDENTIAL_KEY, "k1")

        assert json.loads(path.read_text()) == {"theme": "dark", CREDENTIAL_KEY: "k1"}

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json")
        store = JsonFileStore(path)

        assert store.get(CREDENTIAL_KEY) is None

        store.set(CREDENTIAL_KEY, "k2")
        assert store.get(CREDENTIAL_KEY) == "k2"

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]")

        assert JsonFileStore(path).get(CREDENTIAL_KEY) is None
