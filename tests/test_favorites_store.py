"""Tests for the favorites store."""

import json
import threading

import pytest

from job_scout.config import FAVORITES_STORAGE_KEY
from job_scout.services.favorites_store import FavoritesStore
from job_scout.services.storage_service import JsonFileStorage, KeyValueStorage, MemoryStorage


class CountingStorage(MemoryStorage):
    """MemoryStorage that records every write."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = []

    def set(self, key, value):
        self.writes.append((key, value))
        super().set(key, value)


class BrokenStorage(KeyValueStorage):
    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        pass


def _stored(storage: MemoryStorage) -> set:
    return set(json.loads(storage.get(FAVORITES_STORAGE_KEY)))


class TestLoad:
    def test_missing_key_is_empty(self):
        storage = CountingStorage()
        store = FavoritesStore(storage)
        assert len(store) == 0
        assert storage.writes == []

    def test_hydrates_saved_links(self):
        storage = MemoryStorage({FAVORITES_STORAGE_KEY: json.dumps(["a", "b"])})
        store = FavoritesStore(storage)
        assert store.links == frozenset({"a", "b"})

    @pytest.mark.parametrize("raw", ["{not json", '{"a": 1}', '"just a string"', "42", "null"])
    def test_malformed_data_is_empty(self, raw):
        store = FavoritesStore(MemoryStorage({FAVORITES_STORAGE_KEY: raw}))
        assert len(store) == 0

    def test_non_string_entries_dropped(self):
        storage = MemoryStorage({FAVORITES_STORAGE_KEY: json.dumps(["a", 1, None, ["b"]])})
        assert FavoritesStore(storage).links == frozenset({"a"})

    def test_unreadable_storage_is_empty(self):
        assert len(FavoritesStore(BrokenStorage())) == 0

    def test_custom_key(self):
        storage = MemoryStorage({"other": json.dumps(["x"])})
        assert FavoritesStore(storage, key="other").is_favorite("x")


class TestToggle:
    def test_toggle_adds_then_removes(self):
        store = FavoritesStore(MemoryStorage())
        assert store.toggle("https://jobs.example.com/1") is True
        assert store.is_favorite("https://jobs.example.com/1")
        assert "https://jobs.example.com/1" in store
        assert store.toggle("https://jobs.example.com/1") is False
        assert not store.is_favorite("https://jobs.example.com/1")

    def test_double_toggle_restores_membership(self):
        storage = MemoryStorage({FAVORITES_STORAGE_KEY: json.dumps(["keep"])})
        store = FavoritesStore(storage)
        store.toggle("keep")
        store.toggle("keep")
        assert store.is_favorite("keep")
        assert _stored(storage) == {"keep"}

    def test_every_toggle_persists_full_set(self):
        storage = CountingStorage()
        store = FavoritesStore(storage)
        store.toggle("a")
        store.toggle("b")
        store.toggle("a")
        assert len(storage.writes) == 3
        assert [set(json.loads(v)) for _, v in storage.writes] == [{"a"}, {"a", "b"}, {"b"}]

    def test_storage_reflects_final_set(self):
        storage = MemoryStorage()
        store = FavoritesStore(storage)
        for link in ["a", "b", "c", "b", "d", "a", "a"]:
            store.toggle(link)
        assert _stored(storage) == {"a", "c", "d"}
        assert store.links == frozenset({"a", "c", "d"})

    def test_new_session_sees_saved_favorites(self):
        storage = MemoryStorage()
        FavoritesStore(storage).toggle("a")
        assert FavoritesStore(storage).is_favorite("a")

    def test_links_is_snapshot(self):
        store = FavoritesStore(MemoryStorage())
        snapshot = store.links
        store.toggle("a")
        assert snapshot == frozenset()


class FailingWriteStorage(MemoryStorage):
    def set(self, key, value):
        raise OSError("disk full")


class TestToggleFailures:
    def test_failed_add_is_undone(self):
        store = FavoritesStore(FailingWriteStorage())
        with pytest.raises(OSError):
            store.toggle("a")
        assert not store.is_favorite("a")
        assert len(store) == 0

    def test_failed_remove_is_undone(self):
        store = FavoritesStore(FailingWriteStorage({FAVORITES_STORAGE_KEY: json.dumps(["a"])}))
        with pytest.raises(OSError):
            store.toggle("a")
        assert store.is_favorite("a")


class TestSharedStore:
    def test_concurrent_toggles_all_persisted(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "storage.json")
        store = FavoritesStore(storage)
        links = [f"https://jobs.example.com/{i}" for i in range(40)]

        threads = [threading.Thread(target=store.toggle, args=(link,)) for link in links]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.links == frozenset(links)
        assert set(json.loads(storage.get(FAVORITES_STORAGE_KEY))) == set(links)
