"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import uuid
from typing import Callable, Generator

import pytest

from simple_cache.auth.providers import StringTokenProvider
from simple_cache.cache.client import SimpleCacheClient
from simple_cache.transport.base import CallOptions
from simple_cache.transport.local import LocalTransport
from simple_cache.transport.store import CacheStore

AUTH_TOKEN = "test-auth-token"
BAD_AUTH_TOKEN = "not-a-valid-token"
TEST_CACHE_NAME = "test-cache"
DEFAULT_TTL_SECONDS = 10


# ============================================================================
# Naming
# ============================================================================

@pytest.fixture
def unique() -> Callable[[], str]:
    """Factory for unique cache, key, list and dictionary names."""
    def factory() -> str:
        return uuid.uuid4().hex
    return factory


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> CacheStore:
    """Create a fresh CacheStore with room for 100 entries."""
    return CacheStore(max_size=100)


@pytest.fixture
def small_store() -> CacheStore:
    """Create a CacheStore with small capacity for eviction testing (5 entries)."""
    return CacheStore(max_size=5)


# ============================================================================
# Transport Fixtures
# ============================================================================

@pytest.fixture
def transport() -> LocalTransport:
    """In-process transport accepting only AUTH_TOKEN."""
    return LocalTransport(auth_tokens={AUTH_TOKEN})


@pytest.fixture
def options() -> CallOptions:
    """Valid call options for direct transport calls."""
    return CallOptions(auth_token=AUTH_TOKEN, timeout_seconds=5.0)


# ============================================================================
# Client Fixtures
# ============================================================================

@pytest.fixture
def auth_provider() -> StringTokenProvider:
    return StringTokenProvider(AUTH_TOKEN)


@pytest.fixture
def client(
    auth_provider: StringTokenProvider,
    transport: LocalTransport,
) -> Generator[SimpleCacheClient, None, None]:
    """
    Create a client whose test cache already exists.

    The test cache is deleted again after the test.
    """
    cache_client = SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, transport=transport)

    response = cache_client.create_cache(TEST_CACHE_NAME)
    if error := response.as_error():
        raise error.inner_exception

    yield cache_client

    cache_client.delete_cache(TEST_CACHE_NAME)


@pytest.fixture
def bad_auth_client(client: SimpleCacheClient, transport: LocalTransport) -> SimpleCacheClient:
    """Client sharing the transport but presenting a rejected token."""
    return SimpleCacheClient(StringTokenProvider(BAD_AUTH_TOKEN), DEFAULT_TTL_SECONDS, transport=transport)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
