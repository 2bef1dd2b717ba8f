"""Outcomes of list operations."""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import ErrorResponse, ResponseBase


# Push

class CacheListPushFrontResponse(ResponseBase):
    """Outcome of list_push_front: Success or Error."""

    def as_success(self) -> Optional["CacheListPushFrontResponseSuccess"]:
        return self._as(CacheListPushFrontResponseSuccess)

    def as_error(self) -> Optional["CacheListPushFrontResponseError"]:
        return self._as(CacheListPushFrontResponseError)


@dataclass(frozen=True)
class CacheListPushFrontResponseSuccess(CacheListPushFrontResponse):
    """Length of the list after the push and any truncation."""
    list_length: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.list_length}"


class CacheListPushFrontResponseError(ErrorResponse, CacheListPushFrontResponse):
    pass


class CacheListPushBackResponse(ResponseBase):
    """Outcome of list_push_back: Success or Error."""

    def as_success(self) -> Optional["CacheListPushBackResponseSuccess"]:
        return self._as(CacheListPushBackResponseSuccess)

    def as_error(self) -> Optional["CacheListPushBackResponseError"]:
        return self._as(CacheListPushBackResponseError)


@dataclass(frozen=True)
class CacheListPushBackResponseSuccess(CacheListPushBackResponse):
    """Length of the list after the push and any truncation."""
    list_length: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.list_length}"


class CacheListPushBackResponseError(ErrorResponse, CacheListPushBackResponse):
    pass


# Pop

class CacheListPopFrontResponse(ResponseBase):
    """Outcome of list_pop_front: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheListPopFrontResponseHit"]:
        return self._as(CacheListPopFrontResponseHit)

    def as_miss(self) -> Optional["CacheListPopFrontResponseMiss"]:
        return self._as(CacheListPopFrontResponseMiss)

    def as_error(self) -> Optional["CacheListPopFrontResponseError"]:
        return self._as(CacheListPopFrontResponseError)


@dataclass(frozen=True)
class CacheListPopFrontResponseHit(CacheListPopFrontResponse):
    value: str

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.value}"


class CacheListPopFrontResponseMiss(CacheListPopFrontResponse):
    pass


class CacheListPopFrontResponseError(ErrorResponse, CacheListPopFrontResponse):
    pass


class CacheListPopBackResponse(ResponseBase):
    """Outcome of list_pop_back: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheListPopBackResponseHit"]:
        return self._as(CacheListPopBackResponseHit)

    def as_miss(self) -> Optional["CacheListPopBackResponseMiss"]:
        return self._as(CacheListPopBackResponseMiss)

    def as_error(self) -> Optional["CacheListPopBackResponseError"]:
        return self._as(CacheListPopBackResponseError)


@dataclass(frozen=True)
class CacheListPopBackResponseHit(CacheListPopBackResponse):
    value: str

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.value}"


class CacheListPopBackResponseMiss(CacheListPopBackResponse):
    pass


class CacheListPopBackResponseError(ErrorResponse, CacheListPopBackResponse):
    pass


# Fetch

class CacheListFetchResponse(ResponseBase):
    """Outcome of list_fetch: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheListFetchResponseHit"]:
        return self._as(CacheListFetchResponseHit)

    def as_miss(self) -> Optional["CacheListFetchResponseMiss"]:
        return self._as(CacheListFetchResponseMiss)

    def as_error(self) -> Optional["CacheListFetchResponseError"]:
        return self._as(CacheListFetchResponseError)


@dataclass(frozen=True)
class CacheListFetchResponseHit(CacheListFetchResponse):
    """The list's elements, front to back."""
    values: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {', '.join(self.values)}"


class CacheListFetchResponseMiss(CacheListFetchResponse):
    pass


class CacheListFetchResponseError(ErrorResponse, CacheListFetchResponse):
    pass


# Remove / length / erase

class CacheListRemoveValueResponse(ResponseBase):
    """Outcome of list_remove_value: Success or Error."""

    def as_success(self) -> Optional["CacheListRemoveValueResponseSuccess"]:
        return self._as(CacheListRemoveValueResponseSuccess)

    def as_error(self) -> Optional["CacheListRemoveValueResponseError"]:
        return self._as(CacheListRemoveValueResponseError)


class CacheListRemoveValueResponseSuccess(CacheListRemoveValueResponse):
    pass


class CacheListRemoveValueResponseError(ErrorResponse, CacheListRemoveValueResponse):
    pass


class CacheListLengthResponse(ResponseBase):
    """Outcome of list_length: Success or Error."""

    def as_success(self) -> Optional["CacheListLengthResponseSuccess"]:
        return self._as(CacheListLengthResponseSuccess)

    def as_error(self) -> Optional["CacheListLengthResponseError"]:
        return self._as(CacheListLengthResponseError)


@dataclass(frozen=True)
class CacheListLengthResponseSuccess(CacheListLengthResponse):
    """Number of elements; 0 for a list that does not exist."""
    length: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.length}"


class CacheListLengthResponseError(ErrorResponse, CacheListLengthResponse):
    pass


class CacheListEraseResponse(ResponseBase):
    """Outcome of list_erase: Success or Error."""

    def as_success(self) -> Optional["CacheListEraseResponseSuccess"]:
        return self._as(CacheListEraseResponseSuccess)

    def as_error(self) -> Optional["CacheListEraseResponseError"]:
        return self._as(CacheListEraseResponseError)


class CacheListEraseResponseSuccess(CacheListEraseResponse):
    pass


class CacheListEraseResponseError(ErrorResponse, CacheListEraseResponse):
    pass
