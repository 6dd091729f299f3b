"""Firestore-backed cache for Zoom API responses.

Stores one document per cache key in the configured collection.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from google.api_core import exceptions
from google.cloud import firestore

from zoom_meetings.cache import CacheBackend
from zoom_meetings.exceptions import CacheReadError, CacheWriteError

logger = logging.getLogger(__name__)


class FirestoreCache(CacheBackend):
    """Cache backend storing aggregated responses in Firestore."""

    COLLECTION = "zoom_api_cache"

    def __init__(
        self,
        project_id: Optional[str] = None,
        collection: Optional[str] = None,
        client: Optional[firestore.Client] = None,
    ):
        """Initialize Firestore cache.

        Args:
            project_id: GCP project ID. If None, uses default from environment.
            collection: Collection name, defaults to COLLECTION
            client: Optional preconfigured Firestore client
        """
        self.db = client or firestore.Client(project=project_id)
        self.entries = self.db.collection(collection or self.COLLECTION)

    def get(self, key: str) -> Optional[Any]:
        """Get a cached value.

        Args:
            key: Cache key

        Returns:
            Cached value or None on a miss
        """
        try:
            doc = self.entries.document(key).get()
        except exceptions.GoogleAPICallError as e:
            raise CacheReadError(f"Could not read cache entry {key}: {e}") from e

        if doc.exists:
            return doc.to_dict().get("value")
        return None

    def set(self, key: str, value: Any) -> None:
        """Store a value under a key.

        Args:
            key: Cache key
            value: JSON-compatible value
        """
        try:
            self.entries.document(key).set({
                "value": value,
                "cached_at": datetime.now(timezone.utc),
            })
        except exceptions.GoogleAPICallError as e:
            raise CacheWriteError(f"Could not write cache entry {key}: {e}") from e

        logger.debug(f"Cached {key} in Firestore")

    def clear(self) -> None:
        """Delete every cached entry."""
        deleted = 0
        for doc in self.entries.stream():
            doc.reference.delete()
            deleted += 1
        logger.info(f"Cleared {deleted} cached Zoom responses")
