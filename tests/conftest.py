"""Pytest configuration and fixtures"""
import os

import pytest

# Set test environment variables before storefront.config is imported
os.environ.setdefault("STOREFRONT_STORAGE", "memory")
os.environ.setdefault("STOREFRONT_LANGUAGE", "en")
os.environ.setdefault("STOREFRONT_CURRENCY_SYMBOL", "$")

from storefront.cart import CartStore, MemoryStorage, PersistenceAdapter  # noqa: E402
from storefront.catalog import Catalog  # noqa: E402
from storefront.db import RedisKeys  # noqa: E402


@pytest.fixture
def sample_products():
    """Products with the prices used throughout the cart tests"""
    return [
        {
            "id": "p1",
            "title": "Cotton shirt",
            "price": 29.99,
            "image": "https://example.com/p1.jpg",
            "description": "Comfortable everyday cotton shirt",
        },
        {
            "id": "p2",
            "title": "Backpack",
            "price": 49.50,
            "image": "https://example.com/p2.jpg",
            "description": "Water resistant backpack with pockets",
        },
        {
            "id": "p3",
            "title": "Wireless headphones",
            "price": 79.0,
            "image": "https://example.com/p3.jpg",
            "description": "Long battery life",
        },
    ]


@pytest.fixture
def catalog(sample_products):
    """Catalog built from sample_products"""
    return Catalog(sample_products)


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value storage"""
    return MemoryStorage()


@pytest.fixture
def adapter(memory_storage):
    """Persistence adapter over memory_storage"""
    return PersistenceAdapter(memory_storage)


@pytest.fixture
def cart(adapter):
    """Empty cart persisted through adapter"""
    return CartStore.load(adapter)


@pytest.fixture
def cart_key():
    return RedisKeys.CART


class FailingStorage:
    """Storage whose every call blows up, like an unavailable medium"""

    def __init__(self, error: Exception = None):
        self.error = error or ConnectionError("storage unavailable")
        self.calls = 0

    def get(self, key):
        self.calls += 1
        raise self.error

    def set(self, key, value):
        self.calls += 1
        raise self.error


@pytest.fixture
def failing_storage():
    return FailingStorage()
