"""
Argument Validation

Validators run synchronously, before any transport call, so malformed input
never reaches the service. Each one returns None or raises
InvalidArgumentError with a message describing the problem.
"""

from typing import Optional

from ..cache.errors import InvalidArgumentError


def _is_int(value) -> bool:
    # bool is an int subclass, but True is not a TTL
    return isinstance(value, int) and not isinstance(value, bool)


def validate_ttl(ttl_seconds: int) -> None:
    """Reject TTLs that are not non-negative integers."""
    if not _is_int(ttl_seconds) or ttl_seconds < 0:
        raise InvalidArgumentError("TTL Seconds must be a non-negative integer")


def is_null_or_empty(value: Optional[str] = None, message: Optional[str] = None) -> None:
    """
    Reject a missing, non-string or empty name.

    Args:
        value: Candidate name
        message: Error message to raise with
    """
    if value is None or not isinstance(value, str) or value == "":
        raise InvalidArgumentError(message)


def validate_cache_name(cache_name: str) -> None:
    is_null_or_empty(cache_name, "Cache name must be a non-empty string")


def validate_list_name(list_name: str) -> None:
    is_null_or_empty(list_name, "List name must be a non-empty string")


def validate_dictionary_name(dictionary_name: str) -> None:
    is_null_or_empty(dictionary_name, "Dictionary name must be a non-empty string")


def validate_field_name(field_name: str) -> None:
    is_null_or_empty(field_name, "Field name must be a non-empty string")


def validate_value_name(value: str) -> None:
    is_null_or_empty(value, "Value name must be a non-empty string")


def validate_key(key: str) -> None:
    if not isinstance(key, str):
        raise InvalidArgumentError("Key must be a string")


def validate_value(value: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError("Value must be a string")


def validate_operation_timeout(operation_timeout_ms: Optional[int] = None) -> None:
    """An absent timeout means "use the default"; otherwise it must be positive."""
    if operation_timeout_ms is None:
        return
    if not _is_int(operation_timeout_ms) or operation_timeout_ms <= 0:
        raise InvalidArgumentError("Request timeout must be greater than zero.")


def validate_truncate_size(truncate_size: Optional[int] = None) -> None:
    if truncate_size is None:
        return
    if not _is_int(truncate_size) or truncate_size <= 0:
        raise InvalidArgumentError("Truncate size must be greater than zero.")


def validate_range(begin_index: Optional[int], count: Optional[int]) -> None:
    """
    Validate an optional (begin_index, count) pair.

    Both absent is valid and selects the whole list. Only the sign and
    presence are checked; bounds past the end of a list are left to the
    service.

    Raises:
        InvalidArgumentError: If only one bound is given, begin_index is
            negative, or count is not positive
    """
    if begin_index is None and count is None:
        return
    if (begin_index is None) != (count is None):
        raise InvalidArgumentError("Beginning index and count must be supplied together.")
    if not _is_int(begin_index) or begin_index < 0:
        raise InvalidArgumentError("Beginning index and count must be a positive integer.")
    if not _is_int(count) or count <= 0:
        raise InvalidArgumentError("Count must be greater than zero.")


def validate_increment_amount(amount: int) -> None:
    if not _is_int(amount):
        raise InvalidArgumentError("Increment amount must be an integer.")
