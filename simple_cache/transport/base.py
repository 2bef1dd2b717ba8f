"""
Transport Contract Definitions

This module defines the interface the client uses to reach the cache
service, together with the plain data structures exchanged across it.
Implementations raise TransportError for every failure reported by the
service; the client maps those onto typed error outcomes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional


class StatusCode(Enum):
    """Status codes a transport may report (gRPC-style)."""
    OK = auto()
    CANCELLED = auto()
    UNKNOWN = auto()
    INVALID_ARGUMENT = auto()
    DEADLINE_EXCEEDED = auto()
    NOT_FOUND = auto()
    ALREADY_EXISTS = auto()
    PERMISSION_DENIED = auto()
    RESOURCE_EXHAUSTED = auto()
    FAILED_PRECONDITION = auto()
    ABORTED = auto()
    OUT_OF_RANGE = auto()
    UNIMPLEMENTED = auto()
    INTERNAL = auto()
    UNAVAILABLE = auto()
    DATA_LOSS = auto()
    UNAUTHENTICATED = auto()


class TransportError(Exception):
    """
    Failure reported by the transport.

    Attributes:
        status: The StatusCode returned by the service
        details: Free-form description from the service
    """

    def __init__(self, status: StatusCode, details: str = ""):
        super().__init__(f"{status.name}: {details}" if details else status.name)
        self.status = status
        self.details = details


@dataclass(frozen=True)
class CallOptions:
    """
    Per-call metadata handed to every transport method.

    Attributes:
        auth_token: Token obtained from the client's auth provider
        timeout_seconds: Deadline for the call
    """
    auth_token: str
    timeout_seconds: float


@dataclass(frozen=True)
class CollectionTtl:
    """
    TTL behaviour for collection writes.

    Attributes:
        ttl_seconds: Lifetime applied to the collection
        refresh_ttl: Reset the expiry on every write (True) or only when
            the write creates the collection (False)
    """
    ttl_seconds: int
    refresh_ttl: bool = True


@dataclass(frozen=True)
class CacheInfo:
    """Metadata describing a single cache."""
    name: str


@dataclass(frozen=True)
class ListCachesPage:
    """One page of list_caches results."""
    caches: List[CacheInfo] = field(default_factory=list)
    next_token: Optional[str] = None


class Transport(ABC):
    """
    Interface to the remote cache service.

    Arguments reaching a transport have already been validated by the
    client. Every method takes CallOptions as its last argument and either
    returns the raw result described on the method or raises TransportError.
    """

    # Control plane

    @abstractmethod
    def create_cache(self, cache_name: str, options: CallOptions) -> None:
        """Create a cache. ALREADY_EXISTS if it is already there."""

    @abstractmethod
    def delete_cache(self, cache_name: str, options: CallOptions) -> None:
        """Delete a cache. NOT_FOUND if it does not exist."""

    @abstractmethod
    def list_caches(self, next_token: Optional[str], options: CallOptions) -> ListCachesPage:
        """Return one page of caches starting at next_token."""

    # Scalar values

    @abstractmethod
    def set(self, cache_name: str, key: str, value: str, ttl_seconds: int, options: CallOptions) -> None:
        """Store value under key."""

    @abstractmethod
    def get(self, cache_name: str, key: str, options: CallOptions) -> Optional[str]:
        """Return the value stored under key, None on a miss."""

    @abstractmethod
    def delete(self, cache_name: str, key: str, options: CallOptions) -> None:
        """Remove key. Deleting a missing key succeeds."""

    # Lists

    @abstractmethod
    def list_push_front(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            truncate_back_to_size: Optional[int],
            options: CallOptions,
    ) -> int:
        """Prepend value and return the resulting list length."""

    @abstractmethod
    def list_push_back(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            truncate_front_to_size: Optional[int],
            options: CallOptions,
    ) -> int:
        """Append value and return the resulting list length."""

    @abstractmethod
    def list_pop_front(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[str]:
        """Remove and return the first element, None if the list is missing."""

    @abstractmethod
    def list_pop_back(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[str]:
        """Remove and return the last element, None if the list is missing."""

    @abstractmethod
    def list_fetch(self, cache_name: str, list_name: str, options: CallOptions) -> Optional[List[str]]:
        """Return all elements in order, None if the list is missing."""

    @abstractmethod
    def list_remove_value(self, cache_name: str, list_name: str, value: str, options: CallOptions) -> None:
        """Remove every occurrence of value."""

    @abstractmethod
    def list_length(self, cache_name: str, list_name: str, options: CallOptions) -> int:
        """Return the number of elements, 0 for a missing list."""

    @abstractmethod
    def list_erase(
            self,
            cache_name: str,
            list_name: str,
            begin_index: Optional[int],
            count: Optional[int],
            options: CallOptions,
    ) -> None:
        """Remove count elements from begin_index, or all of them without a range."""

    # Dictionaries

    @abstractmethod
    def dictionary_set(
            self,
            cache_name: str,
            dictionary_name: str,
            field_name: str,
            value: str,
            collection_ttl: CollectionTtl,
            options: CallOptions,
    ) -> None:
        """Store value under field."""

    @abstractmethod
    def dictionary_get(
            self, cache_name: str, dictionary_name: str, field_name: str, options: CallOptions
    ) -> Optional[str]:
        """Return the value of field, None if the dictionary or field is missing."""

    @abstractmethod
    def dictionary_fetch(
            self, cache_name: str, dictionary_name: str, options: CallOptions
    ) -> Optional[Dict[str, str]]:
        """Return every field of the dictionary, None if it is missing."""

    @abstractmethod
    def dictionary_remove_field(
            self, cache_name: str, dictionary_name: str, field_name: str, options: CallOptions
    ) -> None:
        """Remove field from the dictionary."""

    @abstractmethod
    def dictionary_delete(self, cache_name: str, dictionary_name: str, options: CallOptions) -> None:
        """Remove the whole dictionary."""

    @abstractmethod
    def dictionary_increment(
            self,
            cache_name: str,
            dictionary_name: str,
            field_name: str,
            amount: int,
            collection_ttl: CollectionTtl,
            options: CallOptions,
    ) -> int:
        """Add amount to the integer stored in field and return the new value."""
