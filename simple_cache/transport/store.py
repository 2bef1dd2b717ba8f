"""
In-Memory Cache Store

This module implements the storage behind LocalTransport: one CacheStore per
named cache, holding scalar values, lists and dictionaries side by side.

Features:
- TTL: entries expire lazily when they are next touched
- LRU eviction: when a cache is full, the least recently used entry goes
- Collection TTL: list and dictionary writes either refresh the expiry or
  keep it, depending on the caller's refresh_ttl flag
"""

import logging
import time
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from ..config.settings import settings
from .base import CollectionTtl

logger = logging.getLogger(__name__)


class WrongTypeError(Exception):
    """An operation addressed an entry holding a different kind of value."""


class CacheStore:
    """
    Key-value store for a single cache.

    Internal Storage:
        OrderedDict key -> (value, expiration_timestamp), ordered from least
        to most recently used. value is a str, a list or a dict.
        expiration_timestamp = 0 means no expiration.

    Attributes:
        max_size: Maximum number of entries before LRU eviction
    """

    def __init__(self, max_size: int = None):
        self.max_size = max_size if max_size is not None else settings.MAX_ITEMS
        self._store: "OrderedDict[str, Tuple[Any, float]]" = OrderedDict()

    @staticmethod
    def _expiry(ttl: int) -> float:
        return time.time() + ttl if ttl and ttl > 0 else 0

    def _live(self, key: str) -> Optional[Tuple[Any, float]]:
        """Return the entry for key if present and unexpired, touching its LRU slot."""
        entry = self._store.get(key)
        if entry is None:
            return None

        _, expires_at = entry
        if expires_at and expires_at <= time.time():
            # Lazy expiration
            self._store.pop(key, None)
            return None

        self._store.move_to_end(key)
        return entry

    def _insert(self, key: str, value: Any, expires_at: float) -> None:
        if key not in self._store and len(self._store) >= self.max_size:
            evicted, _ = self._store.popitem(last=False)
            logger.debug(f"Evicted least recently used key: {evicted}")
        self._store[key] = (value, expires_at)
        self._store.move_to_end(key)

    # Scalars

    def put(self, key: str, value: str, ttl: int = 0) -> None:
        """Insert or overwrite a scalar value. ttl=0 means no expiration."""
        self._insert(key, value, self._expiry(ttl))

    def get(self, key: str) -> Optional[str]:
        """Return the scalar under key, None if missing or expired."""
        entry = self._live(key)
        if entry is None:
            return None
        value, _ = entry
        if not isinstance(value, str):
            raise WrongTypeError(f"key {key} does not hold a scalar value")
        return value

    def delete(self, key: str) -> bool:
        """
        Delete an entry of any kind.

        Returns:
            True if a live entry was removed, False otherwise
        """
        if self._live(key) is None:
            return False
        self._store.pop(key, None)
        return True

    # Collections

    def read_collection(self, key: str, kind: type) -> Optional[Any]:
        """
        Return the live list or dict stored under key.

        Args:
            key: Collection name
            kind: list or dict

        Returns:
            The collection, or None if it does not exist

        Raises:
            WrongTypeError: If key holds a different kind of value
        """
        entry = self._live(key)
        if entry is None:
            return None
        value, _ = entry
        if not isinstance(value, kind):
            raise WrongTypeError(f"key {key} does not hold a {kind.__name__}")
        return value

    def write_collection(self, key: str, kind: type, collection_ttl: CollectionTtl) -> Any:
        """
        Return the collection under key for mutation, creating it if needed.

        A new collection always gets collection_ttl's expiry. An existing one
        has its expiry reset only when collection_ttl.refresh_ttl is set.
        """
        entry = self._live(key)
        if entry is None:
            collection = kind()
            self._insert(key, collection, self._expiry(collection_ttl.ttl_seconds))
            return collection

        collection, expires_at = entry
        if not isinstance(collection, kind):
            raise WrongTypeError(f"key {key} does not hold a {kind.__name__}")
        if collection_ttl.refresh_ttl:
            self._store[key] = (collection, self._expiry(collection_ttl.ttl_seconds))
        return collection

    def drop_if_empty(self, key: str) -> None:
        """Remove a collection that no longer holds any element."""
        entry = self._store.get(key)
        if entry is not None and not entry[0]:
            self._store.pop(key, None)

    # Maintenance

    def size(self) -> int:
        """Number of entries, possibly including expired ones not yet cleaned up."""
        return len(self._store)

    def cleanup_expired(self) -> int:
        """
        Remove all expired entries.

        Returns:
            Number of entries removed
        """
        now = time.time()
        to_delete = [k for k, (_, exp) in self._store.items() if exp and exp <= now]
        for key in to_delete:
            self._store.pop(key, None)
        return len(to_delete)

    def get_stats(self) -> Dict[str, Any]:
        now = time.time()
        total = self.size()
        expired = sum(1 for _, (_, expires_at) in self._store.items() if 0 < expires_at <= now)

        return {
            "total_keys": total,
            "expired_keys": expired,
            "active_keys": total - expired,
            "max_size": self.max_size,
            "utilization": total / self.max_size if self.max_size > 0 else 0,
        }
