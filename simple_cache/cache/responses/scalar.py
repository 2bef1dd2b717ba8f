"""Outcomes of scalar key operations (set, get, delete)."""

from dataclasses import dataclass
from typing import Optional

from .base import ErrorResponse, ResponseBase


class CacheSetResponse(ResponseBase):
    """Outcome of set: Success or Error."""

    def as_success(self) -> Optional["CacheSetResponseSuccess"]:
        return self._as(CacheSetResponseSuccess)

    def as_error(self) -> Optional["CacheSetResponseError"]:
        return self._as(CacheSetResponseError)


@dataclass(frozen=True)
class CacheSetResponseSuccess(CacheSetResponse):
    """The key and value that were stored."""
    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: key {self.key} = {self.value}"


class CacheSetResponseError(ErrorResponse, CacheSetResponse):
    pass


class CacheGetResponse(ResponseBase):
    """Outcome of get: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheGetResponseHit"]:
        return self._as(CacheGetResponseHit)

    def as_miss(self) -> Optional["CacheGetResponseMiss"]:
        return self._as(CacheGetResponseMiss)

    def as_error(self) -> Optional["CacheGetResponseError"]:
        return self._as(CacheGetResponseError)


@dataclass(frozen=True)
class CacheGetResponseHit(CacheGetResponse):
    value: str

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.value}"


class CacheGetResponseMiss(CacheGetResponse):
    pass


class CacheGetResponseError(ErrorResponse, CacheGetResponse):
    pass


class CacheDeleteResponse(ResponseBase):
    """Outcome of delete: Success or Error."""

    def as_success(self) -> Optional["CacheDeleteResponseSuccess"]:
        return self._as(CacheDeleteResponseSuccess)

    def as_error(self) -> Optional["CacheDeleteResponseError"]:
        return self._as(CacheDeleteResponseError)


class CacheDeleteResponseSuccess(CacheDeleteResponse):
    pass


class CacheDeleteResponseError(ErrorResponse, CacheDeleteResponse):
    pass
