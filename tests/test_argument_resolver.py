from datetime import datetime, timezone

import numpy as np
import pytest

from fakeframe.python_libs.common.argument_resolver import ArgumentResolver
from fakeframe.python_libs.common.exceptions import (
    InvalidArgumentValueError,
    InvalidRangeError,
    InvalidTimestampError,
    MissingArgumentError,
)


class TestGetRange:
    """Tests for range argument resolution."""

    def test_defaults_when_range_absent(self):
        """Missing range falls back to both defaults."""
        resolver = ArgumentResolver("col")
        assert resolver.get_range("uint32", 0, 100) == (0, 100)

    def test_partial_range_uses_default_for_missing_bound(self):
        """Only the absent bound is defaulted."""
        resolver = ArgumentResolver("col", {"range": {"start": 7}})
        assert resolver.get_range("int32", -10, 10) == (7, 10)

    def test_numeric_strings_are_parsed(self):
        """Bounds may be numeric strings."""
        resolver = ArgumentResolver("col", {"range": {"start": "5", "end": " 10 "}})
        assert resolver.get_range("uint32", 0, 100) == (5, 10)

    def test_equal_bounds_are_valid(self):
        """A degenerate range is allowed."""
        resolver = ArgumentResolver("col", {"range": {"start": 3, "end": 3}})
        assert resolver.get_range("int64", 0, 100) == (3, 3)

    def test_start_greater_than_end(self):
        """Reversed bounds raise InvalidRangeError."""
        resolver = ArgumentResolver("col", {"range": {"start": 10, "end": 5}})
        with pytest.raises(InvalidRangeError) as exc_info:
            resolver.get_range("uint32", 0, 100)
        assert exc_info.value.context.column_name == "col"

    def test_reversed_defaults_also_fail(self):
        """A start above the default end is rejected rather than clamped."""
        resolver = ArgumentResolver("col", {"range": {"start": 50}})
        with pytest.raises(InvalidRangeError):
            resolver.get_range("uint32", 3, 10)

    def test_unparsable_string(self):
        """Non-numeric strings raise InvalidArgumentValueError."""
        resolver = ArgumentResolver("col", {"range": {"start": "abc"}})
        with pytest.raises(InvalidArgumentValueError) as exc_info:
            resolver.get_range("uint32", 0, 100)
        assert exc_info.value.context.argument == "range.start"

    def test_float_rejected_for_integer_domain(self):
        """Integer columns do not accept fractional bounds."""
        resolver = ArgumentResolver("col", {"range": {"end": 2.5}})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("int32", 0, 100)

    def test_boolean_rejected(self):
        """Booleans are not numbers here."""
        resolver = ArgumentResolver("col", {"range": {"start": True}})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("uint32", 0, 100)

    def test_negative_rejected_for_unsigned(self):
        """Values outside the dtype domain are invalid."""
        resolver = ArgumentResolver("col", {"range": {"start": -1}})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("uint32", 0, 100)

    def test_overflow_rejected(self):
        """Values above the dtype maximum are invalid."""
        resolver = ArgumentResolver("col", {"range": {"end": 2**31}})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("int32", 0, 100)

    def test_range_must_be_object(self):
        """A non-object range is invalid."""
        resolver = ArgumentResolver("col", {"range": [1, 2]})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("uint32", 0, 100)

    def test_float_domain_accepts_ints_and_strings(self):
        """Float bounds accept integers and numeric strings."""
        resolver = ArgumentResolver("col", {"range": {"start": -1, "end": "2.5"}})
        assert resolver.get_range("float64", 0.0, 1.0) == (-1.0, 2.5)

    def test_float32_bounds_are_rounded_to_storage_precision(self):
        """float32 bounds are representable float32 values."""
        resolver = ArgumentResolver("col", {"range": {"start": 0.1, "end": 0.2}})
        start, end = resolver.get_range("float32", 0.0, 1.0)
        assert start == float(np.float32(0.1))
        assert end == float(np.float32(0.2))

    def test_non_finite_float_rejected(self):
        """inf and nan are not valid bounds."""
        resolver = ArgumentResolver("col", {"range": {"end": "inf"}})
        with pytest.raises(InvalidArgumentValueError):
            resolver.get_range("float64", 0.0, 1.0)


class TestScalarArguments:
    """Tests for string and small unsigned integer arguments."""

    def test_get_string(self):
        """Strings are returned as given."""
        assert ArgumentResolver("col", {"fmt": "^##"}).get_string("fmt") == "^##"

    def test_get_string_missing(self):
        """Absent strings raise MissingArgumentError."""
        with pytest.raises(MissingArgumentError) as exc_info:
            ArgumentResolver("col").get_string("fmt")
        assert exc_info.value.context.argument == "fmt"

    def test_get_string_wrong_kind(self):
        """Numbers are not coerced to strings."""
        with pytest.raises(MissingArgumentError):
            ArgumentResolver("col", {"fmt": 12}).get_string("fmt")

    @pytest.mark.parametrize("value", [0, 128, 255])
    def test_get_small_uint(self, value):
        """Values in 0..255 are accepted."""
        assert ArgumentResolver("col", {"ratio": value}).get_small_uint("ratio") == value

    def test_get_small_uint_missing(self):
        """Required scalars are never defaulted."""
        with pytest.raises(MissingArgumentError):
            ArgumentResolver("col").get_small_uint("ratio")

    @pytest.mark.parametrize("value", ["128", 1.5, True, None])
    def test_get_small_uint_wrong_kind(self, value):
        """Non-integers raise MissingArgumentError."""
        with pytest.raises(MissingArgumentError):
            ArgumentResolver("col", {"ratio": value}).get_small_uint("ratio")

    @pytest.mark.parametrize("value", [-1, 256])
    def test_get_small_uint_out_of_range(self, value):
        """Integers outside 0..255 are rejected rather than truncated."""
        with pytest.raises(InvalidArgumentValueError):
            ArgumentResolver("col", {"ratio": value}).get_small_uint("ratio")


class TestTimestamps:
    """Tests for RFC-3339 timestamp arguments."""

    def test_utc_timestamp(self):
        """A Z suffix is read as UTC."""
        resolver = ArgumentResolver("col", {"dt": "2024-03-01T12:30:00Z"})
        assert resolver.get_timestamp("dt") == datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self):
        """Offsets are normalised to UTC."""
        resolver = ArgumentResolver("col", {"dt": "2024-03-01T01:00:00+02:00"})
        parsed = resolver.get_timestamp("dt")
        assert parsed == datetime(2024, 2, 29, 23, 0, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc

    def test_missing_offset_rejected(self):
        """Naive timestamps are not RFC-3339."""
        with pytest.raises(InvalidTimestampError):
            ArgumentResolver("col", {"dt": "2024-03-01T12:30:00"}).get_timestamp("dt")

    @pytest.mark.parametrize("value", ["yesterday", 1700000000, None])
    def test_invalid_timestamp(self, value):
        """Malformed, non-string or absent timestamps raise InvalidTimestampError."""
        with pytest.raises(InvalidTimestampError):
            ArgumentResolver("col", {"dt": value}).get_timestamp("dt")

    def test_timestamp_range(self):
        """start and end are read from the top-level arguments."""
        resolver = ArgumentResolver(
            "col", {"start": "2020-01-01T00:00:00Z", "end": "2021-01-01T00:00:00Z"}
        )
        start, end = resolver.get_timestamp_range()
        assert start.year == 2020
        assert end.year == 2021

    def test_reversed_timestamp_range(self):
        """start after end raises InvalidRangeError."""
        resolver = ArgumentResolver(
            "col", {"start": "2021-01-01T00:00:00Z", "end": "2020-01-01T00:00:00Z"}
        )
        with pytest.raises(InvalidRangeError):
            resolver.get_timestamp_range()
