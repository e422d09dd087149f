"""
Storefront configuration.

All settings come from environment variables and are read once at import.
"""

import os
from pathlib import Path


def _get_int(name: str, default: int) -> int:
    """Read an integer env var, falling back to default on junk values."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Storage backend: "memory", "file" or "redis"
STOREFRONT_STORAGE = os.environ.get("STOREFRONT_STORAGE", "memory").strip().lower()

# JSON file used by the "file" backend
STOREFRONT_STORAGE_PATH = Path(
    os.environ.get("STOREFRONT_STORAGE_PATH", str(Path(".storefront") / "storage.json"))
)

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# 0 keeps the cart forever, like browser localStorage
CART_TTL_SECONDS = _get_int("CART_TTL_SECONDS", 0)

# Language of checkout messages (en, ar)
STOREFRONT_LANGUAGE = os.environ.get("STOREFRONT_LANGUAGE", "en")

CURRENCY_SYMBOL = os.environ.get("STOREFRONT_CURRENCY_SYMBOL", "$")

STOREFRONT_ENV = os.environ.get("STOREFRONT_ENV", "development")


__all__ = [
    "STOREFRONT_STORAGE",
    "STOREFRONT_STORAGE_PATH",
    "UPSTASH_REDIS_REST_URL",
    "UPSTASH_REDIS_REST_TOKEN",
    "CART_TTL_SECONDS",
    "STOREFRONT_LANGUAGE",
    "CURRENCY_SYMBOL",
    "STOREFRONT_ENV",
]
