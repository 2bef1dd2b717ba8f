"""Utilities module for Simple-Cache."""

from .validation import (
    is_null_or_empty,
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

__all__ = [
    "is_null_or_empty",
    "validate_cache_name",
    "validate_dictionary_name",
    "validate_field_name",
    "validate_increment_amount",
    "validate_key",
    "validate_list_name",
    "validate_operation_timeout",
    "validate_range",
    "validate_truncate_size",
    "validate_ttl",
    "validate_value",
    "validate_value_name",
]
