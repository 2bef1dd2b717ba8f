"""
Tests for Argument Validation

These tests verify the validators run before any transport call:
- TTL, timeout and truncate-size bounds
- non-empty names
- the begin_index/count range pair

Run with: python -m pytest tests/test_validation.py -v
"""

import pytest

from simple_cache.cache.errors import CacheErrorCode, InvalidArgumentError
from simple_cache.utilities.validation import (
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


class TestValidateTtl:
    """Test validate_ttl()."""

    @pytest.mark.parametrize("ttl", [0, 1, 60, 86400])
    def test_accepts_non_negative(self, ttl):
        assert validate_ttl(ttl) is None

    @pytest.mark.parametrize("ttl", [-1, -100])
    def test_rejects_negative(self, ttl):
        with pytest.raises(InvalidArgumentError, match="TTL Seconds must be a non-negative integer"):
            validate_ttl(ttl)

    @pytest.mark.parametrize("ttl", [1.5, "10", None, True])
    def test_rejects_non_integers(self, ttl):
        with pytest.raises(InvalidArgumentError):
            validate_ttl(ttl)

    def test_error_carries_invalid_argument_code(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_ttl(-1)
        assert exc_info.value.error_code == CacheErrorCode.INVALID_ARGUMENT_ERROR


class TestNames:
    """Test the non-empty name validators."""

    def test_is_null_or_empty_uses_given_message(self):
        with pytest.raises(InvalidArgumentError, match="custom message"):
            is_null_or_empty("", "custom message")

    @pytest.mark.parametrize("value", [None, "", 1, b"bytes"])
    def test_is_null_or_empty_rejects(self, value):
        with pytest.raises(InvalidArgumentError):
            is_null_or_empty(value, "bad")

    def test_is_null_or_empty_accepts_text(self):
        assert is_null_or_empty("name", "bad") is None

    @pytest.mark.parametrize("validator, message", [
        (validate_cache_name, "Cache name must be a non-empty string"),
        (validate_list_name, "List name must be a non-empty string"),
        (validate_dictionary_name, "Dictionary name must be a non-empty string"),
        (validate_field_name, "Field name must be a non-empty string"),
        (validate_value_name, "Value name must be a non-empty string"),
    ])
    def test_each_name_has_its_own_message(self, validator, message):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validator("")
        assert exc_info.value.message == message

        # Valid names pass silently
        assert validator("something") is None

    def test_keys_and_values_may_be_empty_strings(self):
        assert validate_key("") is None
        assert validate_value("") is None

    @pytest.mark.parametrize("validator", [validate_key, validate_value])
    def test_keys_and_values_must_be_strings(self, validator):
        with pytest.raises(InvalidArgumentError):
            validator(None)
        with pytest.raises(InvalidArgumentError):
            validator(42)


class TestValidateOperationTimeout:
    """Test validate_operation_timeout()."""

    def test_absent_is_valid(self):
        assert validate_operation_timeout(None) is None
        assert validate_operation_timeout() is None

    def test_positive_is_valid(self):
        assert validate_operation_timeout(1) is None

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_non_positive_is_invalid(self, timeout):
        with pytest.raises(InvalidArgumentError, match="Request timeout must be greater than zero."):
            validate_operation_timeout(timeout)


class TestValidateTruncateSize:
    """Test validate_truncate_size()."""

    def test_absent_is_valid(self):
        assert validate_truncate_size(None) is None

    def test_positive_is_valid(self):
        assert validate_truncate_size(2) is None

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_is_invalid(self, size):
        with pytest.raises(InvalidArgumentError, match="Truncate size must be greater than zero."):
            validate_truncate_size(size)


class TestValidateIncrementAmount:
    """Test validate_increment_amount()."""

    @pytest.mark.parametrize("amount", [1, 0, -7])
    def test_integers_are_valid(self, amount):
        assert validate_increment_amount(amount) is None

    @pytest.mark.parametrize("amount", [1.5, "5", True, None])
    def test_non_integers_are_invalid(self, amount):
        with pytest.raises(InvalidArgumentError, match="Increment amount must be an integer."):
            validate_increment_amount(amount)


class TestValidateRange:
    """Test validate_range() over its whole decision table."""

    def test_both_absent_selects_whole_range(self):
        assert validate_range(None, None) is None

    @pytest.mark.parametrize("begin_index, count", [(0, None), (None, 3)])
    def test_exactly_one_present_is_invalid(self, begin_index, count):
        with pytest.raises(InvalidArgumentError, match="must be supplied together"):
            validate_range(begin_index, count)

    def test_negative_begin_is_invalid(self):
        with pytest.raises(InvalidArgumentError, match="must be a positive integer"):
            validate_range(-1, 2)

    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_count_is_invalid(self, count):
        with pytest.raises(InvalidArgumentError, match="Count must be greater than zero."):
            validate_range(0, count)

    @pytest.mark.parametrize("begin_index, count", [(0, 1), (3, 2), (100, 1000)])
    def test_valid_pairs(self, begin_index, count):
        assert validate_range(begin_index, count) is None

    @pytest.mark.parametrize("begin_index", [None, -2, 0, 1, 5])
    @pytest.mark.parametrize("count", [None, -1, 0, 1, 7])
    def test_matches_reference_rule(self, begin_index, count):
        """Every combination either passes or fails exactly as the rule says."""
        if begin_index is None and count is None:
            should_fail = False
        elif begin_index is None or count is None:
            should_fail = True
        else:
            should_fail = begin_index < 0 or count <= 0

        if should_fail:
            with pytest.raises(InvalidArgumentError):
                validate_range(begin_index, count)
        else:
            validate_range(begin_index, count)

    def test_upper_bounds_are_not_checked(self):
        """Bounds past the end of a list are the service's business."""
        assert validate_range(10 ** 9, 10 ** 9) is None
