"""
Simple Cache Client

SimpleCacheClient is the entry point of the library. Each operation:

1. validates its arguments (simple_cache.utilities.validation),
2. calls the transport once, with the auth token and the request timeout,
3. wraps the raw result, or the failure, in the operation's response variant.

Operations never raise CacheError. Invalid arguments and transport failures
come back as the Error variant, carrying the matching CacheErrorCode. Only
the constructor raises, when the client itself is misconfigured.
"""

import logging
from typing import Optional, Type

from ..config.settings import settings
from ..transport.base import CallOptions, CollectionTtl, Transport
from ..transport.local import LocalTransport
from ..utilities.validation import (
    validate_cache_name,
    validate_dictionary_name,
    validate_field_name,
    validate_increment_amount,
    validate_key,
    validate_list_name,
    validate_operation_timeout,
    validate_range,
    validate_truncate_size,
    validate_ttl,
    validate_value,
    validate_value_name,
)
from .errors import AlreadyExistsError, convert_error
from .responses import (
    CacheDeleteResponse,
    CacheDeleteResponseError,
    CacheDeleteResponseSuccess,
    CacheDictionaryDeleteResponse,
    CacheDictionaryDeleteResponseError,
    CacheDictionaryDeleteResponseSuccess,
    CacheDictionaryFetchResponse,
    CacheDictionaryFetchResponseError,
    CacheDictionaryFetchResponseHit,
    CacheDictionaryFetchResponseMiss,
    CacheDictionaryGetResponse,
    CacheDictionaryGetResponseError,
    CacheDictionaryGetResponseHit,
    CacheDictionaryGetResponseMiss,
    CacheDictionaryIncrementResponse,
    CacheDictionaryIncrementResponseError,
    CacheDictionaryIncrementResponseSuccess,
    CacheDictionaryRemoveFieldResponse,
    CacheDictionaryRemoveFieldResponseError,
    CacheDictionaryRemoveFieldResponseSuccess,
    CacheDictionarySetResponse,
    CacheDictionarySetResponseError,
    CacheDictionarySetResponseSuccess,
    CacheGetResponse,
    CacheGetResponseError,
    CacheGetResponseHit,
    CacheGetResponseMiss,
    CacheListEraseResponse,
    CacheListEraseResponseError,
    CacheListEraseResponseSuccess,
    CacheListFetchResponse,
    CacheListFetchResponseError,
    CacheListFetchResponseHit,
    CacheListFetchResponseMiss,
    CacheListLengthResponse,
    CacheListLengthResponseError,
    CacheListLengthResponseSuccess,
    CacheListPopBackResponse,
    CacheListPopBackResponseError,
    CacheListPopBackResponseHit,
    CacheListPopBackResponseMiss,
    CacheListPopFrontResponse,
    CacheListPopFrontResponseError,
    CacheListPopFrontResponseHit,
    CacheListPopFrontResponseMiss,
    CacheListPushBackResponse,
    CacheListPushBackResponseError,
    CacheListPushBackResponseSuccess,
    CacheListPushFrontResponse,
    CacheListPushFrontResponseError,
    CacheListPushFrontResponseSuccess,
    CacheListRemoveValueResponse,
    CacheListRemoveValueResponseError,
    CacheListRemoveValueResponseSuccess,
    CacheSetResponse,
    CacheSetResponseError,
    CacheSetResponseSuccess,
    CreateCacheResponse,
    CreateCacheResponseAlreadyExists,
    CreateCacheResponseError,
    CreateCacheResponseSuccess,
    DeleteCacheResponse,
    DeleteCacheResponseError,
    DeleteCacheResponseSuccess,
    ErrorResponse,
    ListCachesResponse,
    ListCachesResponseError,
    ListCachesResponseSuccess,
)

logger = logging.getLogger(__name__)


class SimpleCacheClient:
    """
    Client for the cache service.

    Usage:
        client = SimpleCacheClient(EnvTokenProvider("CACHE_AUTH_TOKEN"), 60)
        client.create_cache("my-cache")
        client.set("my-cache", "key", "value")
        hit = client.get("my-cache", "key").as_hit()

    Attributes:
        default_ttl_seconds: TTL applied when an operation gets none
        request_timeout_ms: Deadline of every transport call
    """

    def __init__(
            self,
            auth_provider,
            default_ttl_seconds: int,
            request_timeout_ms: Optional[int] = None,
            transport: Optional[Transport] = None,
    ):
        """
        Initialize the client.

        Args:
            auth_provider: Object exposing get_auth_token()
            default_ttl_seconds: Non-negative default TTL (0 = no expiration)
            request_timeout_ms: Positive request timeout (default from settings)
            transport: Transport to use (in-process LocalTransport if not provided)

        Raises:
            InvalidArgumentError: If the TTL or timeout is invalid
        """
        validate_ttl(default_ttl_seconds)
        validate_operation_timeout(request_timeout_ms)

        self._auth_provider = auth_provider
        self.default_ttl_seconds = default_ttl_seconds
        self.request_timeout_ms = (
            request_timeout_ms if request_timeout_ms is not None else settings.REQUEST_TIMEOUT_MS
        )
        self._transport = transport if transport is not None else LocalTransport()

    # Helpers

    def _options(self) -> CallOptions:
        return CallOptions(
            auth_token=self._auth_provider.get_auth_token(),
            timeout_seconds=self.request_timeout_ms / 1000,
        )

    def _ttl(self, ttl_seconds: Optional[int]) -> int:
        if ttl_seconds is None:
            return self.default_ttl_seconds
        validate_ttl(ttl_seconds)
        return ttl_seconds

    def _collection_ttl(self, ttl_seconds: Optional[int], refresh_ttl: bool) -> CollectionTtl:
        return CollectionTtl(ttl_seconds=self._ttl(ttl_seconds), refresh_ttl=bool(refresh_ttl))

    @staticmethod
    def _error(response_class: Type[ErrorResponse], exc: Exception, operation: str):
        error = convert_error(exc)
        logger.warning(f"{operation} failed: {error.error_code.value}: {error.message}")
        return response_class(error)

    # Control plane

    def create_cache(self, cache_name: str) -> CreateCacheResponse:
        logger.debug(f"Creating cache: {cache_name}")
        try:
            validate_cache_name(cache_name)
            self._transport.create_cache(cache_name, self._options())
        except Exception as exc:
            error = convert_error(exc)
            if isinstance(error, AlreadyExistsError):
                return CreateCacheResponseAlreadyExists()
            return self._error(CreateCacheResponseError, error, "create_cache")
        return CreateCacheResponseSuccess()

    def delete_cache(self, cache_name: str) -> DeleteCacheResponse:
        logger.debug(f"Deleting cache: {cache_name}")
        try:
            validate_cache_name(cache_name)
            self._transport.delete_cache(cache_name, self._options())
        except Exception as exc:
            return self._error(DeleteCacheResponseError, exc, "delete_cache")
        return DeleteCacheResponseSuccess()

    def list_caches(self, next_token: Optional[str] = None) -> ListCachesResponse:
        logger.debug("Listing caches")
        try:
            page = self._transport.list_caches(next_token, self._options())
        except Exception as exc:
            return self._error(ListCachesResponseError, exc, "list_caches")
        return ListCachesResponseSuccess(caches=list(page.caches), next_token=page.next_token)

    # Scalar values

    def set(self, cache_name: str, key: str, value: str, ttl_seconds: Optional[int] = None) -> CacheSetResponse:
        """
        Store value under key.

        Args:
            cache_name: Target cache
            key: Key to store under
            value: Value to store
            ttl_seconds: Entry TTL (client default if not provided)
        """
        logger.debug(f"Setting key {key} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_key(key)
            validate_value(value)
            ttl = self._ttl(ttl_seconds)
            self._transport.set(cache_name, key, value, ttl, self._options())
        except Exception as exc:
            return self._error(CacheSetResponseError, exc, "set")
        return CacheSetResponseSuccess(key=key, value=value)

    def get(self, cache_name: str, key: str) -> CacheGetResponse:
        logger.debug(f"Getting key {key} from cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_key(key)
            value = self._transport.get(cache_name, key, self._options())
        except Exception as exc:
            return self._error(CacheGetResponseError, exc, "get")
        if value is None:
            return CacheGetResponseMiss()
        return CacheGetResponseHit(value=value)

    def delete(self, cache_name: str, key: str) -> CacheDeleteResponse:
        logger.debug(f"Deleting key {key} from cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_key(key)
            self._transport.delete(cache_name, key, self._options())
        except Exception as exc:
            return self._error(CacheDeleteResponseError, exc, "delete")
        return CacheDeleteResponseSuccess()

    # Lists

    def list_push_front(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            refresh_ttl: bool,
            ttl_seconds: Optional[int] = None,
            truncate_back_to_size: Optional[int] = None,
    ) -> CacheListPushFrontResponse:
        """
        Prepend value to a list, creating the list if needed.

        Args:
            cache_name: Target cache
            list_name: Target list
            value: Element to prepend
            refresh_ttl: Reset the list's TTL even if it already exists
            ttl_seconds: List TTL (client default if not provided)
            truncate_back_to_size: Drop elements from the back beyond this size
        """
        logger.debug(f"Pushing to front of list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            validate_value(value)
            validate_truncate_size(truncate_back_to_size)
            collection_ttl = self._collection_ttl(ttl_seconds, refresh_ttl)
            length = self._transport.list_push_front(
                cache_name, list_name, value, collection_ttl, truncate_back_to_size, self._options()
            )
        except Exception as exc:
            return self._error(CacheListPushFrontResponseError, exc, "list_push_front")
        return CacheListPushFrontResponseSuccess(list_length=length)

    def list_push_back(
            self,
            cache_name: str,
            list_name: str,
            value: str,
            refresh_ttl: bool,
            ttl_seconds: Optional[int] = None,
            truncate_front_to_size: Optional[int] = None,
    ) -> CacheListPushBackResponse:
        """
        Append value to a list, creating the list if needed.

        Args:
            cache_name: Target cache
            list_name: Target list
            value: Element to append
            refresh_ttl: Reset the list's TTL even if it already exists
            ttl_seconds: List TTL (client default if not provided)
            truncate_front_to_size: Drop elements from the front beyond this size
        """
        logger.debug(f"Pushing to back of list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            validate_value(value)
            validate_truncate_size(truncate_front_to_size)
            collection_ttl = self._collection_ttl(ttl_seconds, refresh_ttl)
            length = self._transport.list_push_back(
                cache_name, list_name, value, collection_ttl, truncate_front_to_size, self._options()
            )
        except Exception as exc:
            return self._error(CacheListPushBackResponseError, exc, "list_push_back")
        return CacheListPushBackResponseSuccess(list_length=length)

    def list_pop_front(self, cache_name: str, list_name: str) -> CacheListPopFrontResponse:
        logger.debug(f"Popping front of list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            value = self._transport.list_pop_front(cache_name, list_name, self._options())
        except Exception as exc:
            return self._error(CacheListPopFrontResponseError, exc, "list_pop_front")
        if value is None:
            return CacheListPopFrontResponseMiss()
        return CacheListPopFrontResponseHit(value=value)

    def list_pop_back(self, cache_name: str, list_name: str) -> CacheListPopBackResponse:
        logger.debug(f"Popping back of list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            value = self._transport.list_pop_back(cache_name, list_name, self._options())
        except Exception as exc:
            return self._error(CacheListPopBackResponseError, exc, "list_pop_back")
        if value is None:
            return CacheListPopBackResponseMiss()
        return CacheListPopBackResponseHit(value=value)

    def list_fetch(self, cache_name: str, list_name: str) -> CacheListFetchResponse:
        logger.debug(f"Fetching list {list_name} from cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            values = self._transport.list_fetch(cache_name, list_name, self._options())
        except Exception as exc:
            return self._error(CacheListFetchResponseError, exc, "list_fetch")
        if values is None:
            return CacheListFetchResponseMiss()
        return CacheListFetchResponseHit(values=list(values))

    def list_remove_value(self, cache_name: str, list_name: str, value: str) -> CacheListRemoveValueResponse:
        """Remove every occurrence of value from the list."""
        logger.debug(f"Removing value from list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            validate_value(value)
            self._transport.list_remove_value(cache_name, list_name, value, self._options())
        except Exception as exc:
            return self._error(CacheListRemoveValueResponseError, exc, "list_remove_value")
        return CacheListRemoveValueResponseSuccess()

    def list_length(self, cache_name: str, list_name: str) -> CacheListLengthResponse:
        logger.debug(f"Getting length of list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            length = self._transport.list_length(cache_name, list_name, self._options())
        except Exception as exc:
            return self._error(CacheListLengthResponseError, exc, "list_length")
        return CacheListLengthResponseSuccess(length=length)

    def list_erase(
            self,
            cache_name: str,
            list_name: str,
            begin_index: Optional[int] = None,
            count: Optional[int] = None,
    ) -> CacheListEraseResponse:
        """
        Remove count elements starting at begin_index.

        Without a range the whole list is erased. A count running past the
        end of the list stops at the end.
        """
        logger.debug(f"Erasing from list {list_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_list_name(list_name)
            validate_range(begin_index, count)
            self._transport.list_erase(cache_name, list_name, begin_index, count, self._options())
        except Exception as exc:
            return self._error(CacheListEraseResponseError, exc, "list_erase")
        return CacheListEraseResponseSuccess()

    # Dictionaries

    def dictionary_set(
            self,
            cache_name: str,
            dictionary_name: str,
            field: str,
            value: str,
            refresh_ttl: bool,
            ttl_seconds: Optional[int] = None,
    ) -> CacheDictionarySetResponse:
        logger.debug(f"Setting field {field} of dictionary {dictionary_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            validate_field_name(field)
            validate_value_name(value)
            collection_ttl = self._collection_ttl(ttl_seconds, refresh_ttl)
            self._transport.dictionary_set(
                cache_name, dictionary_name, field, value, collection_ttl, self._options()
            )
        except Exception as exc:
            return self._error(CacheDictionarySetResponseError, exc, "dictionary_set")
        return CacheDictionarySetResponseSuccess()

    def dictionary_get(self, cache_name: str, dictionary_name: str, field: str) -> CacheDictionaryGetResponse:
        logger.debug(f"Getting field {field} of dictionary {dictionary_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            validate_field_name(field)
            value = self._transport.dictionary_get(cache_name, dictionary_name, field, self._options())
        except Exception as exc:
            return self._error(CacheDictionaryGetResponseError, exc, "dictionary_get")
        if value is None:
            return CacheDictionaryGetResponseMiss()
        return CacheDictionaryGetResponseHit(value=value)

    def dictionary_fetch(self, cache_name: str, dictionary_name: str) -> CacheDictionaryFetchResponse:
        logger.debug(f"Fetching dictionary {dictionary_name} from cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            fields = self._transport.dictionary_fetch(cache_name, dictionary_name, self._options())
        except Exception as exc:
            return self._error(CacheDictionaryFetchResponseError, exc, "dictionary_fetch")
        if fields is None:
            return CacheDictionaryFetchResponseMiss()
        return CacheDictionaryFetchResponseHit(dictionary=dict(fields))

    def dictionary_remove_field(
            self, cache_name: str, dictionary_name: str, field: str
    ) -> CacheDictionaryRemoveFieldResponse:
        logger.debug(f"Removing field {field} of dictionary {dictionary_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            validate_field_name(field)
            self._transport.dictionary_remove_field(cache_name, dictionary_name, field, self._options())
        except Exception as exc:
            return self._error(CacheDictionaryRemoveFieldResponseError, exc, "dictionary_remove_field")
        return CacheDictionaryRemoveFieldResponseSuccess()

    def dictionary_delete(self, cache_name: str, dictionary_name: str) -> CacheDictionaryDeleteResponse:
        logger.debug(f"Deleting dictionary {dictionary_name} from cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            self._transport.dictionary_delete(cache_name, dictionary_name, self._options())
        except Exception as exc:
            return self._error(CacheDictionaryDeleteResponseError, exc, "dictionary_delete")
        return CacheDictionaryDeleteResponseSuccess()

    def dictionary_increment(
            self,
            cache_name: str,
            dictionary_name: str,
            field: str,
            refresh_ttl: bool,
            amount: int = 1,
            ttl_seconds: Optional[int] = None,
    ) -> CacheDictionaryIncrementResponse:
        """
        Add amount to the integer stored in a dictionary field.

        A missing field counts as 0. A field holding something that is not
        an integer yields FAILED_PRECONDITION_ERROR.

        Returns:
            Success carrying the new value, or Error
        """
        logger.debug(f"Incrementing field {field} of dictionary {dictionary_name} in cache {cache_name}")
        try:
            validate_cache_name(cache_name)
            validate_dictionary_name(dictionary_name)
            validate_field_name(field)
            validate_increment_amount(amount)
            collection_ttl = self._collection_ttl(ttl_seconds, refresh_ttl)
            value = self._transport.dictionary_increment(
                cache_name, dictionary_name, field, amount, collection_ttl, self._options()
            )
        except Exception as exc:
            return self._error(CacheDictionaryIncrementResponseError, exc, "dictionary_increment")
        return CacheDictionaryIncrementResponseSuccess(value=value)
