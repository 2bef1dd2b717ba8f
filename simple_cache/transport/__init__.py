"""Transport module for Simple-Cache."""

from .base import (
    CacheInfo,
    CallOptions,
    CollectionTtl,
    ListCachesPage,
    StatusCode,
    Transport,
    TransportError,
)
from .local import LocalTransport

__all__ = [
    "CacheInfo",
    "CallOptions",
    "CollectionTtl",
    "ListCachesPage",
    "LocalTransport",
    "StatusCode",
    "Transport",
    "TransportError",
]
