"""Durable slot access for the cart."""
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from storefront.db import RedisKeys, TTL, get_redis_sync, redis_configured
from storefront.errors import ERROR_PERSISTENCE_UNAVAILABLE, PersistenceError
from storefront.logging import get_logger

logger = get_logger(__name__)

CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "cart")
CART_STORAGE_BACKEND = os.environ.get("CART_STORAGE_BACKEND", "")


class CartStorage(ABC):
    """Key-value port holding the serialized cart.

    Implementations store and return the raw serialized string; encoding
    and validation belong to CartStore.
    """

    @abstractmethod
    def load_raw(self) -> Optional[str]:
        """Return the stored value, or None if the slot is empty.

        Raises:
            PersistenceError: If the backend cannot be read
        """

    @abstractmethod
    def save_raw(self, value: str) -> None:
        """Replace the stored value in a single write.

        Raises:
            PersistenceError: If the backend rejects the write
        """


class InMemoryCartStorage(CartStorage):
    """Dict-backed storage for tests and local runs."""

    def __init__(self, initial: Optional[str] = None, key: str = CART_STORAGE_KEY):
        self.key = key
        self._slots: Dict[str, str] = {}
        self.writes = 0
        self.fail_writes = False
        if initial is not None:
            self._slots[key] = initial

    def load_raw(self) -> Optional[str]:
        return self._slots.get(self.key)

    def save_raw(self, value: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"{ERROR_PERSISTENCE_UNAVAILABLE}: quota exceeded")
        self._slots[self.key] = value
        self.writes += 1


class RedisCartStorage(CartStorage):
    """Upstash Redis backed slot."""

    def __init__(self, redis: Any = None, slot: str = CART_STORAGE_KEY, ttl: int = TTL.CART):
        self._redis = redis  # Lazy initialization
        self.key = RedisKeys.cart_key(slot)
        self.ttl = ttl

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            try:
                self._redis = get_redis_sync()
            except ValueError as e:
                raise PersistenceError(f"{ERROR_PERSISTENCE_UNAVAILABLE}: {e}", raw_error=e) from e
        return self._redis

    def load_raw(self) -> Optional[str]:
        try:
            data = self.redis.get(self.key)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Failed to read cart from Redis: {e}")
            raise PersistenceError(f"{ERROR_PERSISTENCE_UNAVAILABLE}: {e}", raw_error=e) from e
        if data is None:
            return None
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return str(data)

    def save_raw(self, value: str) -> None:
        try:
            if self.ttl > 0:
                self.redis.set(self.key, value, ex=self.ttl)
            else:
                self.redis.set(self.key, value)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Failed to save cart to Redis: {e}")
            raise PersistenceError(f"{ERROR_PERSISTENCE_UNAVAILABLE}: {e}", raw_error=e) from e


def get_cart_storage(backend: Optional[str] = None) -> CartStorage:
    """
    Build the storage backend selected by configuration.

    "redis" uses Upstash; "memory" keeps the slot in-process. With no
    explicit choice Redis is used when its credentials are present.
    """
    backend = (backend or CART_STORAGE_BACKEND).lower()
    if not backend:
        backend = "redis" if redis_configured() else "memory"

    if backend == "redis":
        return RedisCartStorage()
    if backend == "memory":
        logger.info("Using in-memory cart storage; cart will not survive restarts")
        return InMemoryCartStorage()
    raise ValueError(f"Unknown cart storage backend: {backend}")
