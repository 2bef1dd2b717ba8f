"""Outcomes of dictionary operations."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .base import ErrorResponse, ResponseBase


class CacheDictionarySetResponse(ResponseBase):
    """Outcome of dictionary_set: Success or Error."""

    def as_success(self) -> Optional["CacheDictionarySetResponseSuccess"]:
        return self._as(CacheDictionarySetResponseSuccess)

    def as_error(self) -> Optional["CacheDictionarySetResponseError"]:
        return self._as(CacheDictionarySetResponseError)


class CacheDictionarySetResponseSuccess(CacheDictionarySetResponse):
    pass


class CacheDictionarySetResponseError(ErrorResponse, CacheDictionarySetResponse):
    pass


class CacheDictionaryGetResponse(ResponseBase):
    """Outcome of dictionary_get: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheDictionaryGetResponseHit"]:
        return self._as(CacheDictionaryGetResponseHit)

    def as_miss(self) -> Optional["CacheDictionaryGetResponseMiss"]:
        return self._as(CacheDictionaryGetResponseMiss)

    def as_error(self) -> Optional["CacheDictionaryGetResponseError"]:
        return self._as(CacheDictionaryGetResponseError)


@dataclass(frozen=True)
class CacheDictionaryGetResponseHit(CacheDictionaryGetResponse):
    value: str

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.value}"


class CacheDictionaryGetResponseMiss(CacheDictionaryGetResponse):
    pass


class CacheDictionaryGetResponseError(ErrorResponse, CacheDictionaryGetResponse):
    pass


class CacheDictionaryFetchResponse(ResponseBase):
    """Outcome of dictionary_fetch: Hit, Miss or Error."""

    def as_hit(self) -> Optional["CacheDictionaryFetchResponseHit"]:
        return self._as(CacheDictionaryFetchResponseHit)

    def as_miss(self) -> Optional["CacheDictionaryFetchResponseMiss"]:
        return self._as(CacheDictionaryFetchResponseMiss)

    def as_error(self) -> Optional["CacheDictionaryFetchResponseError"]:
        return self._as(CacheDictionaryFetchResponseError)


@dataclass(frozen=True)
class CacheDictionaryFetchResponseHit(CacheDictionaryFetchResponse):
    """Every field of the dictionary and its value."""
    dictionary: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        fields = ', '.join(f"{name}: {value}" for name, value in self.dictionary.items())
        return f"{self.__class__.__name__}: {fields}"


class CacheDictionaryFetchResponseMiss(CacheDictionaryFetchResponse):
    pass


class CacheDictionaryFetchResponseError(ErrorResponse, CacheDictionaryFetchResponse):
    pass


class CacheDictionaryRemoveFieldResponse(ResponseBase):
    """Outcome of dictionary_remove_field: Success or Error."""

    def as_success(self) -> Optional["CacheDictionaryRemoveFieldResponseSuccess"]:
        return self._as(CacheDictionaryRemoveFieldResponseSuccess)

    def as_error(self) -> Optional["CacheDictionaryRemoveFieldResponseError"]:
        return self._as(CacheDictionaryRemoveFieldResponseError)


class CacheDictionaryRemoveFieldResponseSuccess(CacheDictionaryRemoveFieldResponse):
    pass


class CacheDictionaryRemoveFieldResponseError(ErrorResponse, CacheDictionaryRemoveFieldResponse):
    pass


class CacheDictionaryDeleteResponse(ResponseBase):
    """Outcome of dictionary_delete: Success or Error."""

    def as_success(self) -> Optional["CacheDictionaryDeleteResponseSuccess"]:
        return self._as(CacheDictionaryDeleteResponseSuccess)

    def as_error(self) -> Optional["CacheDictionaryDeleteResponseError"]:
        return self._as(CacheDictionaryDeleteResponseError)


class CacheDictionaryDeleteResponseSuccess(CacheDictionaryDeleteResponse):
    pass


class CacheDictionaryDeleteResponseError(ErrorResponse, CacheDictionaryDeleteResponse):
    pass


class CacheDictionaryIncrementResponse(ResponseBase):
    """Outcome of dictionary_increment: Success or Error."""

    def as_success(self) -> Optional["CacheDictionaryIncrementResponseSuccess"]:
        return self._as(CacheDictionaryIncrementResponseSuccess)

    def as_error(self) -> Optional["CacheDictionaryIncrementResponseError"]:
        return self._as(CacheDictionaryIncrementResponseError)


@dataclass(frozen=True)
class CacheDictionaryIncrementResponseSuccess(CacheDictionaryIncrementResponse):
    """The field's value after the increment."""
    value: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.value}"


class CacheDictionaryIncrementResponseError(ErrorResponse, CacheDictionaryIncrementResponse):
    pass
