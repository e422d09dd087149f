"""
Tests for cart persistence backends and the persistence adapter
"""

import json
from unittest.mock import Mock

import pytest

from storefront import db as db_module
from storefront.cart import CartStore
from storefront.cart import storage as storage_module
from storefront.cart.storage import (
    FileStorage,
    MemoryStorage,
    PersistenceAdapter,
    RedisStorage,
    get_persistence_adapter,
    get_storage,
)


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_get_missing(self):
        assert MemoryStorage().get("k") is None

    def test_set_and_get(self):
        storage = MemoryStorage()
        storage.set("k", "v")

        assert storage.get("k") == "v"


class TestFileStorage:
    """Tests for FileStorage."""

    def test_get_without_file(self, tmp_path):
        """Test a missing file reads as empty."""
        assert FileStorage(tmp_path / "store.json").get("k") is None

    def test_values_survive_new_instance(self, tmp_path):
        """Test values written by one instance are read by another."""
        path = tmp_path / "nested" / "store.json"
        FileStorage(path).set("a", '{"p1": 1}')
        FileStorage(path).set("b", "x")

        storage = FileStorage(path)
        assert storage.get("a") == '{"p1": 1}'
        assert storage.get("b") == "x"

    def test_set_replaces_corrupt_file(self, tmp_path):
        """Test an unreadable file does not block saving."""
        path = tmp_path / "store.json"
        path.write_text("{broken", encoding="utf-8")

        storage = FileStorage(path)
        storage.set("k", "v")

        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    @pytest.mark.parametrize(
        "content",
        [b"{broken", b"\xff\xfe\x00not utf-8", b"[1, 2]"],
    )
    def test_corrupt_file_loads_as_absent(self, tmp_path, content):
        """Test a broken or non-UTF-8 file degrades to no stored value."""
        path = tmp_path / "store.json"
        path.write_bytes(content)

        assert PersistenceAdapter(FileStorage(path)).load("cart") is None

    def test_corrupt_file_gives_empty_cart(self, tmp_path):
        """Test a store loaded from a broken file starts empty and still saves."""
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff{oops")

        cart = CartStore.load(PersistenceAdapter(FileStorage(path)))
        assert cart.snapshot() == {}

        cart.add("p1", 2)
        assert CartStore.load(PersistenceAdapter(FileStorage(path))).snapshot() == {"p1": 2}

    def test_non_string_value_reads_as_missing(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"k": 5}), encoding="utf-8")

        assert FileStorage(path).get("k") is None


class TestRedisStorage:
    """Tests for RedisStorage with a mocked Upstash client."""

    def test_get(self):
        redis = Mock()
        redis.get.return_value = '{"p1": 2}'

        assert RedisStorage(redis=redis).get("cart") == '{"p1": 2}'
        redis.get.assert_called_once_with("cart")

    def test_set_without_ttl(self):
        redis = Mock()
        RedisStorage(redis=redis, ttl=None).set("cart", "{}")

        redis.set.assert_called_once_with("cart", "{}")

    def test_set_with_ttl(self):
        redis = Mock()
        RedisStorage(redis=redis, ttl=86400).set("cart", "{}")

        redis.set.assert_called_once_with("cart", "{}", ex=86400)

    def test_lazy_client_requires_credentials(self, monkeypatch):
        """Test the client is only built on first use and needs env vars."""
        monkeypatch.setattr(db_module, "_redis_client", None)
        monkeypatch.setattr(db_module, "UPSTASH_REDIS_REST_URL", "")
        monkeypatch.setattr(db_module, "UPSTASH_REDIS_REST_TOKEN", "")

        storage = RedisStorage()
        with pytest.raises(ValueError):
            storage.get("cart")

    def test_missing_credentials_load_as_absent(self, monkeypatch):
        """Test the adapter absorbs the configuration error."""
        monkeypatch.setattr(db_module, "_redis_client", None)
        monkeypatch.setattr(db_module, "UPSTASH_REDIS_REST_URL", "")

        adapter = PersistenceAdapter(RedisStorage())
        assert adapter.load("cart") is None
        adapter.save("cart", {"p1": 1})


class TestPersistenceAdapter:
    """Tests for PersistenceAdapter."""

    def test_round_trip(self, adapter):
        adapter.save("k", {"p1": 2, "p2": 1})

        assert adapter.load("k") == {"p1": 2, "p2": 1}

    def test_load_missing(self, adapter):
        assert adapter.load("missing") is None

    def test_load_malformed(self):
        adapter = PersistenceAdapter(MemoryStorage({"k": "{oops"}))

        assert adapter.load("k") is None

    def test_load_unavailable(self, failing_storage):
        assert PersistenceAdapter(failing_storage).load("k") is None

    def test_save_unavailable_is_swallowed(self, failing_storage, caplog):
        PersistenceAdapter(failing_storage).save("k", {"p1": 1})

        assert failing_storage.calls == 1
        assert "Failed to save k" in caplog.text

    def test_save_unserializable_is_swallowed(self, memory_storage):
        adapter = PersistenceAdapter(memory_storage)
        adapter.save("k", {"p1": object()})

        assert memory_storage.get("k") is None

    def test_save_keeps_unicode(self, memory_storage):
        PersistenceAdapter(memory_storage).save("k", {"قميص": 1})

        assert "قميص" in memory_storage.get("k")


class TestGetStorage:
    """Tests for backend selection."""

    def test_memory(self):
        assert isinstance(get_storage("memory"), MemoryStorage)

    def test_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(storage_module, "STOREFRONT_STORAGE_PATH", tmp_path / "s.json")
        storage = get_storage("file")

        assert isinstance(storage, FileStorage)
        assert storage.path == tmp_path / "s.json"

    def test_redis(self):
        assert isinstance(get_storage("redis"), RedisStorage)

    def test_unknown_falls_back_to_memory(self):
        assert isinstance(get_storage("carrier-pigeon"), MemoryStorage)

    def test_adapter_uses_given_storage(self, memory_storage):
        assert get_persistence_adapter(memory_storage).storage is memory_storage
