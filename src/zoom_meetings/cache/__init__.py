"""Cache backends for Zoom API responses."""

import logging
import time
from typing import Any, Optional

from cachetools import LRUCache, TTLCache

from zoom_meetings.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CacheBackend:
    """Key-value store used to memoize aggregated API responses.

    ``get`` returns None on a miss. Backends raise CacheReadError or
    CacheWriteError when the underlying store fails.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class InMemoryCache(CacheBackend):
    """Process-local cache bounded by entry count, with optional expiry."""

    MAX_ENTRIES = 256

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        max_entries: Optional[int] = None,
        timer=time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds or None
        self.max_entries = max_entries or self.MAX_ENTRIES
        if self.ttl_seconds:
            self._entries = TTLCache(maxsize=self.max_entries, ttl=self.ttl_seconds, timer=timer)
        else:
            self._entries = LRUCache(maxsize=self.max_entries)

    def get(self, key: str) -> Optional[Any]:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

def create_cache(config) -> Optional[CacheBackend]:
    """
    Build the cache backend selected by configuration.

    Args:
        config: Config class (or object with the same attributes)

    Returns:
        Cache backend, or None when caching is disabled
    """
    backend = config.CACHE_BACKEND
    if backend == "none":
        logger.info("Response caching disabled")
        return None
    if backend == "firestore":
        from zoom_meetings.gcp.firestore_cache import FirestoreCache

        return FirestoreCache(
            project_id=config.GCP_PROJECT_ID or None,
            collection=config.FIRESTORE_CACHE_COLLECTION,
        )
    if backend == "memory":
        return InMemoryCache(
            ttl_seconds=config.CACHE_TTL_SECONDS,
            max_entries=config.CACHE_MAX_ENTRIES,
        )

    raise ConfigurationError(f"Unknown cache backend: {backend}")


__all__ = ["CacheBackend", "InMemoryCache", "create_cache"]
