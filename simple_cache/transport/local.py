"""
In-Process Transport

LocalTransport serves the transport contract from memory, inside the calling
process. It lets the client run end to end without a network: in tests, in
examples and during local development.

It reproduces the service behaviour the client relies on:
- named caches, NOT_FOUND for unknown caches, ALREADY_EXISTS on re-create
- optional token checking (UNAUTHENTICATED)
- simulated latency checked against the call deadline (DEADLINE_EXCEEDED)
- lazy TTL expiry and per-cache LRU eviction (see store.py)
"""

import logging
import threading
import time
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from ..config.settings import settings
from .base import (
    CacheInfo,
    CallOptions,
    CollectionTtl,
    ListCachesPage,
    StatusCode,
    Transport,
    TransportError,
)
from .store import CacheStore, WrongTypeError

logger = logging.getLogger(__name__)


class LocalTransport(Transport):
    """
    Thread-safe, in-memory implementation of Transport.

    Usage:
        transport = LocalTransport(auth_tokens={"secret"})
        client = SimpleCacheClient(StringTokenProvider("secret"), 60, transport=transport)

    Attributes:
        auth_tokens: Accepted tokens, or None to accept any token
        latency_seconds: Simulated service time added to every call
        max_items: Entry limit of each cache
        page_size: Number of caches per list_caches page
    """

    def __init__(
            self,
            auth_tokens: Optional[Iterable[str]] = None,
            latency_seconds: float = 0.0,
            max_items: int = None,
            page_size: int = None,
    ):
        self.auth_tokens = set(auth_tokens) if auth_tokens is not None else None
        self.latency_seconds = latency_seconds
        self.max_items = max_items if max_items is not None else settings.MAX_ITEMS
        self.page_size = page_size if page_size is not None else settings.PAGE_SIZE
        if self.page_size <= 0:
            raise ValueError(f"page_size must be greater than zero, got {self.page_size}")

        self._caches: Dict[str, CacheStore] = {}
        self._lock = threading.Lock()
        self._total_requests = 0

    @contextmanager
    def _call(self, options: CallOptions) -> Iterator[None]:
        """Authenticate, apply latency and hold the lock for one request."""
        if self.auth_tokens is not None and options.auth_token not in self.auth_tokens:
            raise TransportError(StatusCode.UNAUTHENTICATED, "invalid auth token")

        if self.latency_seconds:
            time.sleep(min(self.latency_seconds, options.timeout_seconds))
            if self.latency_seconds > options.timeout_seconds:
                raise TransportError(
                    StatusCode.DEADLINE_EXCEEDED,
                    f"deadline of {options.timeout_seconds}s exceeded",
                )

        with self._lock:
            self._total_requests += 1
            try:
                yield
            except WrongTypeError as exc:
                raise TransportError(StatusCode.FAILED_PRECONDITION, str(exc)) from exc

    def _cache(self, cache_name: str) -> CacheStore:
        if not cache_name:
            raise TransportError(StatusCode.INVALID_ARGUMENT, "cache name must not be empty")
        store = self._caches.get(cache_name)
        if store is None:
            raise TransportError(StatusCode.NOT_FOUND, f"cache {cache_name} not found")
        return store

    # Control plane

    def create_cache(self, cache_name: str, options: CallOptions) -> None:
        with self._call(options):
            if not cache_name:
                raise TransportError(StatusCode.INVALID_ARGUMENT, "cache name must not be empty")
            if cache_name in self._caches:
                raise TransportError(StatusCode.ALREADY_EXISTS, f"cache {cache_name} already exists")
            self._caches[cache_name] = CacheStore(max_size=self.max_items)
            logger.info(f"Created cache: {cache_name}")

    def delete_cache(self, cache_name: str, options: CallOptions) -> None:
        with self._call(options):
            self._cache(cache_name)
            del self._caches[cache_name]
            logger.info(f"Deleted cache: {cache_name}")

    def list_caches(self, next_token: Optional[str], options: CallOptions) -> ListCachesPage:
        with self._call(options):
            start = 0
            if next_token:
                try:
                    start = int(next_token)
                except ValueError as exc:
                    raise TransportError(StatusCode.INVALID_ARGUMENT, f"invalid next token: {next_token}") from exc
                if start < 0:
                    raise TransportError(StatusCode.INVALID_ARGUMENT, f"invalid next token: {next_token}")

            names = sorted(self._caches)
            end = start + self.page_size
            token = str(end) if end < len(names) else None
            return ListCachesPage(
                caches=[CacheInfo(name=name) for name in names[start:end]],
                next_token=token,
            )

    # Scalar values

    def set(self, cache_name: str, key: str, value: str, ttl_seconds: int, options: CallOptions) -> None:
        with self._call(options):
            self._cache(cache_name).put(key, value, ttl=ttl_seconds)

    def get(self, cache_name: str, key: str, options: CallOptions) -> Optional[str]:
        with self._call(options):
            return self._cache(cache_name).get(key)

    def delete(self, cache_name: str, key: str, options: CallOptions) -> None:
        with self._call(options):
            self._cache(cache_name).delete(key)

    # Lists

    def list_push_front(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            truncate_back_to_size: Optional[int],
            options: CallOptions,
    ) -> int:
        with self._call(options):
            values = self._cache(cache_name).write_collection(list_name, list, collection_ttl)
            values.insert(0, value)
            if truncate_back_to_size is not None:
                del values[truncate_back_to_size:]
            return len(values)

    def list_push_back(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            truncate_front_to_size: Optional[int],
            options: CallOptions,
    ) -> int:
        with self._call(options):
            values = self._cache(cache_name).write_collection(list_name, list, collection_ttl)
            values.append(value)
            if truncate_front_to_size is not None and len(values) > truncate_front_to_size:
                del values[:len(values) - truncate_front_to_size]
            return len(values)

    def _pop(self, cache_name: str, list_name: str, index: int) -> Optional[str]:
        store = self._cache(cache_name)
        values = store.read_collection(list_name, list)
        if not values:
            return None
        value = values.pop(index)
        store.drop_if_empty(list_name)
        return value

    def list_pop_front(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[str]:
        with self._call(options):
            return self._pop(cache_name, list_name, 0)

    def list_pop_back(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[str]:
        with self._call(options):
            return self._pop(cache_name, list_name, -1)

    def list_fetch(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[List[str]]:
        with self._call(options):
            values = self._cache(cache_name).read_collection(list_name, list)
            return list(values) if values else None

    def list_remove_value(self, cache_name: str, list_name: str, value: str, options: CallOptions) -> None:
        with self._call(options):
            store = self._cache(cache_name)
            values = store.read_collection(list_name, list)
            if values is None:
                return
            values[:] = [v for v in values if v != value]
            store.drop_if_empty(list_name)

    def list_length(self, cache_name: str, list_name: str, options: CallOptions) -> int:
        with self._call(options):
            values = self._cache(cache_name).read_collection(list_name, list)
            return len(values) if values else 0

    def list_erase(
            self,
            cache_name: str,
            list_name: str,
            begin_index: Optional[int],
            count: Optional[int],
            options: CallOptions,
    ) -> None:
        with self._call(options):
            store = self._cache(cache_name)
            values = store.read_collection(list_name, list)
            if values is None:
                return
            if begin_index is None:
                values.clear()
            else:
                # Slicing clamps ranges running past the end
                del values[begin_index:begin_index + count]
            store.drop_if_empty(list_name)

    # Dictionaries

    def dictionary_set(
            self,
            cache_name: str,
            dictionary_name: str,
            field_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            options: CallOptions,
    ) -> None:
        with self._call(options):
            fields = self._cache(cache_name).write_collection(dictionary_name, dict, collection_ttl)
            fields[field_name] = value

    def dictionary_get(
            self, cache_name: str, dictionary_name: str, field_name: str, options: CallOptions
    ) -> Optional[str]:
        with self._call(options):
            fields = self._cache(cache_name).read_collection(dictionary_name, dict)
            if fields is None:
                return None
            return fields.get(field_name)

    def dictionary_fetch(
            self, cache_name: str, dictionary_name: str, options: CallOptions
    ) -> Optional[Dict[str, str]]:
        with self._call(options):
            fields = self._cache(cache_name).read_collection(dictionary_name, dict)
            return dict(fields) if fields else None

    def dictionary_remove_field(
            self, cache_name: str, dictionary_name: str, field_name: str, options: CallOptions
    ) -> None:
        with self._call(options):
            store = self._cache(cache_name)
            fields = store.read_collection(dictionary_name, dict)
            if fields is None:
                return
            fields.pop(field_name, None)
            store.drop_if_empty(dictionary_name)

    def dictionary_delete(self, cache_name: str, dictionary_name: str, options: CallOptions) -> None:
        with self._call(options):
            store = self._cache(cache_name)
            # Validates the kind before removing
            store.read_collection(dictionary_name, dict)
            store.delete(dictionary_name)

    def dictionary_increment(
            self,
            cache_name: str,
            dictionary_name: str,
            field_name: str,
            amount: int,
            collection_ttl: CollectionTtl,
            options: CallOptions,
    ) -> int:
        with self._call(options):
            store = self._cache(cache_name)
            current = store.read_collection(dictionary_name, dict) or {}
            try:
                value = int(current.get(field_name, "0")) + amount
            except ValueError as exc:
                raise TransportError(
                    StatusCode.FAILED_PRECONDITION,
                    f"field {field_name} does not hold an integer",
                ) from exc

            fields = store.write_collection(dictionary_name, dict, collection_ttl)
            fields[field_name] = str(value)
            return value

    # Maintenance

    def cleanup_expired(self) -> int:
        """
        Remove expired entries from every cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            return sum(store.cleanup_expired() for store in self._caches.values())

    def get_stats(self) -> dict:
        with self._lock:
            return {
                "total_requests": self._total_requests,
                "caches": {name: store.get_stats() for name, store in self._caches.items()},
            }
