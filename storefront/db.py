"""
Database Module - Upstash Redis client

Provides the singleton Upstash Redis client that backs the durable cart slot,
plus key naming and TTL constants.
"""

import os
from typing import Optional

from upstash_redis import Redis


# Environment variables (Upstash uses REST_URL and REST_TOKEN)
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


# Singleton instance
_sync_redis_client: Optional[Redis] = None


def redis_configured() -> bool:
    """True when Upstash credentials are present in the environment."""
    return bool(UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN)


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    The cart core is single-threaded and synchronous, so the blocking client
    is used: a mutation's write completes before the call returns.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        if not redis_configured():
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _sync_redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    # Cart storage
    CART = "storefront:cart:"  # storefront:cart:{slot}

    @staticmethod
    def cart_key(slot: str) -> str:
        return f"{RedisKeys.CART}{slot}"


class TTL:
    """Time-to-live constants for Redis keys (seconds, 0 = no expiry)."""

    CART = int(os.environ.get("CART_TTL_SECONDS", "0") or 0)
