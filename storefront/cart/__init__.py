"""Cart package: models, storage, and store."""
from .models import CartEvent, LineItem
from .service import CartStore, get_cart_store, normalize_cart, persistence_subscriber
from .storage import FileStorage, MemoryStorage, PersistenceAdapter, RedisStorage, get_persistence_adapter

__all__ = [
    "CartEvent",
    "LineItem",
    "CartStore",
    "get_cart_store",
    "normalize_cart",
    "persistence_subscriber",
    "FileStorage",
    "MemoryStorage",
    "PersistenceAdapter",
    "RedisStorage",
    "get_persistence_adapter",
]
