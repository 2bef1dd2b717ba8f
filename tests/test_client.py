"""
Tests for SimpleCacheClient: construction, cache control and scalar values

These tests drive the client end to end over LocalTransport:
- construction-time validation of TTL and timeout
- create/delete/list caches
- set/get/delete and TTL handling
- validation, authentication and timeout failures returned as Error

Run with: python -m pytest tests/test_client.py -v
"""

import time

import pytest

from simple_cache.auth.providers import EnvTokenProvider, StringTokenProvider
from simple_cache.cache.client import SimpleCacheClient
from simple_cache.cache.errors import CacheErrorCode, InvalidArgumentError
from simple_cache.transport.base import Transport
from simple_cache.transport.local import LocalTransport
from tests.conftest import DEFAULT_TTL_SECONDS, TEST_CACHE_NAME


class ExplodingTransport(LocalTransport):
    """Transport that fails every get with an unexpected exception."""

    def get(self, cache_name, key, options):
        raise RuntimeError("socket closed")


class TestClientConstruction:
    """Test configuration errors raised by the constructor."""

    def test_negative_default_ttl(self, auth_provider):
        with pytest.raises(InvalidArgumentError, match="TTL Seconds must be a non-negative integer"):
            SimpleCacheClient(auth_provider, -1)

    def test_negative_request_timeout(self, auth_provider):
        with pytest.raises(InvalidArgumentError, match="Request timeout must be greater than zero."):
            SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, -1)

    def test_zero_request_timeout(self, auth_provider):
        with pytest.raises(InvalidArgumentError, match="Request timeout must be greater than zero."):
            SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, 0)

    def test_defaults(self, auth_provider):
        client = SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS)

        assert client.default_ttl_seconds == DEFAULT_TTL_SECONDS
        assert client.request_timeout_ms == 5000
        assert isinstance(client._transport, Transport)

    def test_construction_does_not_touch_transport(self, auth_provider):
        transport = LocalTransport()
        SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, transport=transport)
        assert transport.get_stats()["total_requests"] == 0


class TestCreateCache:
    """Test create_cache()."""

    def test_create_set_get_delete(self, client, unique):
        cache_name = unique()
        key = unique()
        value = unique()

        response = client.create_cache(cache_name)
        assert response.as_error() is None
        assert response.as_success() is not None

        response = client.set(cache_name, key, value)
        assert response.as_error() is None
        assert response.as_success() is not None
        assert str(response) == f"CacheSetResponseSuccess: key {key} = {value}"

        response = client.get(cache_name, key)
        assert response.as_error() is None
        hit = response.as_hit()
        assert hit is not None
        assert hit.value == value
        assert str(hit) == f"CacheGetResponseHit: {value}"

        # Same key in another cache is a miss
        response = client.get(TEST_CACHE_NAME, key)
        assert response.as_error() is None
        assert response.as_miss() is not None

        response = client.delete_cache(cache_name)
        assert response.as_success() is not None

    def test_already_exists(self, client):
        response = client.create_cache(TEST_CACHE_NAME)
        assert response.as_error() is None
        assert response.as_success() is None
        assert response.as_already_exists() is not None

    def test_empty_name(self, client):
        response = client.create_cache("")
        error = response.as_error()

        assert error is not None
        assert error.error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR
        assert str(error) == f"CreateCacheResponseError: {error.message}"

    @pytest.mark.parametrize("cache_name", [None, 1])
    def test_bad_name_types(self, client, cache_name):
        response = client.create_cache(cache_name)
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR

    def test_bad_auth(self, bad_auth_client, unique):
        response = bad_auth_client.create_cache(unique())
        assert response.as_error().error_code == CacheErrorCode.AUTHENTICATION_ERROR


class TestDeleteCache:
    """Test delete_cache()."""

    def test_delete_succeeds_once(self, client, unique):
        cache_name = unique()
        assert client.create_cache(cache_name).as_success() is not None

        response = client.delete_cache(cache_name)
        assert response.as_error() is None
        assert response.as_success() is not None

        response = client.delete_cache(cache_name)
        assert response.as_error().error_code == CacheErrorCode.NOT_FOUND_ERROR

    def test_delete_unknown_cache(self, client, unique):
        response = client.delete_cache(unique())
        assert response.as_error().error_code == CacheErrorCode.NOT_FOUND_ERROR

    @pytest.mark.parametrize("cache_name", ["", None])
    def test_delete_invalid_name(self, client, cache_name):
        response = client.delete_cache(cache_name)
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR

    def test_bad_auth(self, bad_auth_client, unique):
        response = bad_auth_client.delete_cache(unique())
        assert response.as_error().error_code == CacheErrorCode.AUTHENTICATION_ERROR


class TestListCaches:
    """Test list_caches()."""

    def test_lists_created_cache(self, client, unique):
        cache_name = unique()
        response = client.list_caches()
        assert response.as_error() is None
        assert cache_name not in response.as_success().cache_names()

        try:
            assert client.create_cache(cache_name).as_error() is None

            success = client.list_caches().as_success()
            names = success.cache_names()

            assert cache_name in names
            assert success.next_token is None
            assert str(success) == f"ListCachesResponseSuccess: {', '.join(names)}"
        finally:
            assert client.delete_cache(cache_name).as_error() is None

    def test_next_token(self, auth_provider):
        transport = LocalTransport(page_size=1)
        client = SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, transport=transport)
        client.create_cache("first")
        client.create_cache("second")

        page = client.list_caches().as_success()
        assert page.cache_names() == ["first"]
        assert page.next_token is not None

        page = client.list_caches(page.next_token).as_success()
        assert page.cache_names() == ["second"]
        assert page.next_token is None

    def test_bad_auth(self, bad_auth_client):
        response = bad_auth_client.list_caches()
        assert response.as_error().error_code == CacheErrorCode.AUTHENTICATION_ERROR


class TestSetAndGet:
    """Test set(), get() and TTL handling."""

    def test_cache_hit(self, client, unique):
        key = unique()
        value = unique()

        response = client.set(TEST_CACHE_NAME, key, value)
        assert response.as_error() is None
        success = response.as_success()
        assert success.key == key
        assert success.value == value

        hit = client.get(TEST_CACHE_NAME, key).as_hit()
        assert hit is not None
        assert hit.value == value

    def test_get_miss(self, client, unique):
        response = client.get(TEST_CACHE_NAME, unique())
        assert response.as_error() is None
        assert response.as_hit() is None
        assert response.as_miss() is not None

    @pytest.mark.slow
    def test_expires_after_default_ttl(self, auth_provider, transport, unique):
        key = unique()
        client = SimpleCacheClient(auth_provider, 1, transport=transport)
        client.create_cache(TEST_CACHE_NAME)

        assert client.set(TEST_CACHE_NAME, key, "value").as_success() is not None
        assert client.get(TEST_CACHE_NAME, key).as_hit() is not None

        time.sleep(1.5)

        assert client.get(TEST_CACHE_NAME, key).as_miss() is not None

    @pytest.mark.slow
    def test_set_with_different_ttls(self, client, unique):
        key1 = unique()
        key2 = unique()

        assert client.set(TEST_CACHE_NAME, key1, "1", 1).as_success() is not None
        assert client.set(TEST_CACHE_NAME, key2, "2").as_success() is not None

        assert client.get(TEST_CACHE_NAME, key1).as_hit() is not None
        assert client.get(TEST_CACHE_NAME, key2).as_hit() is not None

        time.sleep(1.5)

        assert client.get(TEST_CACHE_NAME, key1).as_miss() is not None
        assert client.get(TEST_CACHE_NAME, key2).as_hit() is not None

    def test_set_nonexistent_cache(self, client, unique):
        response = client.set(unique(), "key", "value")
        assert response.as_error().error_code == CacheErrorCode.NOT_FOUND_ERROR

    def test_get_nonexistent_cache(self, client, unique):
        response = client.get(unique(), "key")
        assert response.as_error().error_code == CacheErrorCode.NOT_FOUND_ERROR

    @pytest.mark.parametrize("cache_name, key, value", [
        ("", "key", "value"),
        (None, "key", "value"),
        (TEST_CACHE_NAME, None, "value"),
        (TEST_CACHE_NAME, "key", None),
    ])
    def test_set_invalid_arguments(self, client, cache_name, key, value):
        response = client.set(cache_name, key, value)
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR

    def test_set_negative_ttl(self, client):
        response = client.set(TEST_CACHE_NAME, "key", "value", -1)
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR

    @pytest.mark.parametrize("cache_name, key", [("", "key"), (None, "key"), (TEST_CACHE_NAME, None)])
    def test_get_invalid_arguments(self, client, cache_name, key):
        response = client.get(cache_name, key)
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR

    def test_invalid_input_never_reaches_transport(self, client, transport):
        before = transport.get_stats()["total_requests"]
        client.set("", "key", "value")
        client.get(TEST_CACHE_NAME, None)
        assert transport.get_stats()["total_requests"] == before

    def test_set_bad_auth(self, bad_auth_client):
        response = bad_auth_client.set(TEST_CACHE_NAME, "foo", "bar")
        assert response.as_error().error_code == CacheErrorCode.AUTHENTICATION_ERROR

    def test_get_bad_auth(self, bad_auth_client):
        response = bad_auth_client.get(TEST_CACHE_NAME, "key")
        assert response.as_error().error_code == CacheErrorCode.AUTHENTICATION_ERROR

    def test_get_timeout(self, auth_provider):
        transport = LocalTransport(latency_seconds=0.05)
        client = SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, 1, transport=transport)

        response = client.get(TEST_CACHE_NAME, "key")

        assert response.as_error().error_code == CacheErrorCode.TIMEOUT_ERROR

    def test_unexpected_transport_failure(self, auth_provider):
        client = SimpleCacheClient(auth_provider, DEFAULT_TTL_SECONDS, transport=ExplodingTransport())

        error = client.get(TEST_CACHE_NAME, "key").as_error()

        assert error.error_code == CacheErrorCode.UNKNOWN_ERROR
        assert isinstance(error.inner_exception.__cause__, RuntimeError)


class TestDelete:
    """Test delete()."""

    def test_delete_nonexistent_key(self, client):
        key = "a key that isn't there"
        assert client.get(TEST_CACHE_NAME, key).as_miss() is not None

        response = client.delete(TEST_CACHE_NAME, key)
        assert response.as_error() is None
        assert response.as_success() is not None

        assert client.get(TEST_CACHE_NAME, key).as_miss() is not None

    def test_delete(self, client):
        key = "key1"
        assert client.get(TEST_CACHE_NAME, key).as_miss() is not None
        assert client.set(TEST_CACHE_NAME, key, "value").as_success() is not None
        assert client.get(TEST_CACHE_NAME, key).as_hit() is not None

        assert client.delete(TEST_CACHE_NAME, key).as_success() is not None

        assert client.get(TEST_CACHE_NAME, key).as_miss() is not None

    def test_delete_invalid_cache_name(self, client):
        response = client.delete("", "key")
        assert response.as_error().error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR


class TestAuthProviders:
    """Test the token providers."""

    def test_string_provider(self):
        assert StringTokenProvider("token").get_auth_token() == "token"

    def test_string_provider_rejects_empty(self):
        with pytest.raises(InvalidArgumentError):
            StringTokenProvider("")

    def test_env_provider(self, monkeypatch):
        monkeypatch.setenv("SIMPLE_CACHE_TEST_TOKEN", "from-env")
        assert EnvTokenProvider("SIMPLE_CACHE_TEST_TOKEN").get_auth_token() == "from-env"

    def test_env_provider_missing_variable(self, monkeypatch):
        monkeypatch.delenv("SIMPLE_CACHE_TEST_TOKEN", raising=False)
        with pytest.raises(InvalidArgumentError, match="SIMPLE_CACHE_TEST_TOKEN"):
            EnvTokenProvider("SIMPLE_CACHE_TEST_TOKEN")
