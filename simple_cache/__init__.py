"""
Simple-Cache: Client for a Managed Cache Service

A synchronous client exposing scalar, list and dictionary operations on a
remote cache. Every operation returns a typed outcome (Success, Hit, Miss,
AlreadyExists or Error) instead of raising.
"""

from .cache import CacheErrorCode, InvalidArgumentError, SimpleCacheClient
from .auth import EnvTokenProvider, StringTokenProvider
from .transport import LocalTransport

__version__ = "1.0.0"

__all__ = [
    "CacheErrorCode",
    "EnvTokenProvider",
    "InvalidArgumentError",
    "LocalTransport",
    "SimpleCacheClient",
    "StringTokenProvider",
]
