"""Outcomes of cache-level operations (create, delete, list)."""

from dataclasses import dataclass, field
from typing import List, Optional

from ...transport.base import CacheInfo
from .base import ErrorResponse, ResponseBase


class CreateCacheResponse(ResponseBase):
    """Outcome of create_cache: Success, AlreadyExists or Error."""

    def as_success(self) -> Optional["CreateCacheResponseSuccess"]:
        return self._as(CreateCacheResponseSuccess)

    def as_already_exists(self) -> Optional["CreateCacheResponseAlreadyExists"]:
        return self._as(CreateCacheResponseAlreadyExists)

    def as_error(self) -> Optional["CreateCacheResponseError"]:
        return self._as(CreateCacheResponseError)


class CreateCacheResponseSuccess(CreateCacheResponse):
    pass


class CreateCacheResponseAlreadyExists(CreateCacheResponse):
    pass


class CreateCacheResponseError(ErrorResponse, CreateCacheResponse):
    pass


class DeleteCacheResponse(ResponseBase):
    """Outcome of delete_cache: Success or Error."""

    def as_success(self) -> Optional["DeleteCacheResponseSuccess"]:
        return self._as(DeleteCacheResponseSuccess)

    def as_error(self) -> Optional["DeleteCacheResponseError"]:
        return self._as(DeleteCacheResponseError)


class DeleteCacheResponseSuccess(DeleteCacheResponse):
    pass


class DeleteCacheResponseError(ErrorResponse, DeleteCacheResponse):
    pass


class ListCachesResponse(ResponseBase):
    """Outcome of list_caches: Success or Error."""

    def as_success(self) -> Optional["ListCachesResponseSuccess"]:
        return self._as(ListCachesResponseSuccess)

    def as_error(self) -> Optional["ListCachesResponseError"]:
        return self._as(ListCachesResponseError)


@dataclass(frozen=True)
class ListCachesResponseSuccess(ListCachesResponse):
    """
    One page of caches.

    Attributes:
        caches: Metadata of each cache on this page
        next_token: Token for the following page, None on the last one
    """
    caches: List[CacheInfo] = field(default_factory=list)
    next_token: Optional[str] = None

    def cache_names(self) -> List[str]:
        return [cache.name for cache in self.caches]

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {', '.join(self.cache_names())}"


class ListCachesResponseError(ErrorResponse, ListCachesResponse):
    pass
