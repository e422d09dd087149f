"""
Cart persistence.

PersistenceAdapter is the only code that touches the storage medium. It
stores one JSON value per key on top of a KeyValueStorage backend and
never lets a storage failure reach the caller.
"""
import json
from pathlib import Path
from typing import Any, Optional, Protocol

from storefront.config import STOREFRONT_STORAGE, STOREFRONT_STORAGE_PATH
from storefront.db import TTL, get_redis_sync
from storefront.logging import get_logger

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """Raw string storage with get/set semantics."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage. Survives as long as the instance does."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class FileStorage:
    """
    All keys in one JSON file, the local-session equivalent of
    browser localStorage.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            # Unreadable file gets overwritten
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        tmp_path.replace(self.path)


class RedisStorage:
    """Upstash Redis backend with optional expiry."""

    def __init__(self, redis=None, ttl: Optional[int] = TTL.CART):
        self._redis = redis  # Lazy initialization
        self.ttl = ttl

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def get(self, key: str) -> Optional[str]:
        return self.redis.get(key)

    def set(self, key: str, value: str) -> None:
        if self.ttl:
            self.redis.set(key, value, ex=self.ttl)
        else:
            self.redis.set(key, value)


class PersistenceAdapter:
    """
    Best-effort JSON persistence.

    load() returns None on any failure (missing key, malformed payload,
    storage unavailable); save() logs and drops any failure.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self, key: str) -> Optional[Any]:
        """Load and decode the value stored under key."""
        try:
            raw = self.storage.get(key)
        except Exception as e:
            logger.warning(f"Storage unavailable, loading {key} as absent: {e}")
            return None

        if raw is None or raw == "":
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Corrupted data under {key}, ignoring it: {e}")
            return None

    def save(self, key: str, value: Any) -> None:
        """Encode and store value under key. Never raises."""
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.warning(f"Value for {key} is not JSON-serializable: {e}")
            return

        try:
            self.storage.set(key, payload)
        except Exception as e:
            logger.warning(f"Failed to save {key}: {e}")


def get_storage(backend: str = STOREFRONT_STORAGE) -> KeyValueStorage:
    """Build the storage backend named by STOREFRONT_STORAGE."""
    if backend == "redis":
        return RedisStorage()
    if backend == "file":
        return FileStorage(STOREFRONT_STORAGE_PATH)
    if backend != "memory":
        logger.warning(f"Unknown storage backend {backend!r}, using memory")
    return MemoryStorage()


def get_persistence_adapter(storage: Optional[KeyValueStorage] = None) -> PersistenceAdapter:
    """Adapter over the given storage or the configured backend."""
    return PersistenceAdapter(storage if storage is not None else get_storage())


__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "RedisStorage",
    "PersistenceAdapter",
    "get_storage",
    "get_persistence_adapter",
]
