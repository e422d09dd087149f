"""
Database Module - Upstash Redis client and storage key names

Provides a singleton sync Upstash Redis client. The cart engine is
single-threaded and never awaits, so only the sync client is used.
"""

from typing import Optional

from upstash_redis import Redis

from storefront.config import CART_TTL_SECONDS, UPSTASH_REDIS_REST_TOKEN, UPSTASH_REDIS_REST_URL

# Singleton instance
_redis_client: Optional[Redis] = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _redis_client


class RedisKeys:
    """Fixed keys for persisted storefront state."""

    # Serialized cart mapping {product_id: quantity}
    CART = "shop_cart_v1"


class TTL:
    """Time-to-live constants for stored keys (seconds, None = no expiry)."""

    CART: Optional[int] = CART_TTL_SECONDS or None
