"""
Response Variant Base Classes

Every client operation returns exactly one outcome object. The outcome *is*
its variant: each operation has a base class listing the variants it can
take (as_success, as_hit, as_miss, ...), and each variant is a subclass of
that base. An accessor returns the object itself when that variant is active
and None otherwise, so callers branch on data instead of catching exceptions:

    response = client.get("cache", "key")
    if hit := response.as_hit():
        print(hit.value)
    elif error := response.as_error():
        print(error.error_code, error.message)
"""

from dataclasses import dataclass
from typing import Optional, Type, TypeVar

from ..errors import CacheError, CacheErrorCode

V = TypeVar("V")


class ResponseBase:
    """Common behaviour for all outcome objects."""

    def _as(self, variant: Type[V]) -> Optional[V]:
        return self if isinstance(self, variant) else None

    def __str__(self) -> str:
        return self.__class__.__name__


@dataclass(frozen=True)
class ErrorResponse(ResponseBase):
    """
    Shared shape of every Error variant.

    Attributes:
        inner_exception: The CacheError describing the failure
    """
    inner_exception: CacheError

    @property
    def error_code(self) -> CacheErrorCode:
        return self.inner_exception.error_code

    @property
    def message(self) -> str:
        return self.inner_exception.message

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"
