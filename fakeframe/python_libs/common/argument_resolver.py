"""
Typed access to a column's argument bag.

Column arguments arrive as an arbitrary JSON/YAML mapping. Each generation
strategy reads its parameters through an ``ArgumentResolver`` which either
returns a validated value or raises a specific ``ArgumentError`` subclass.
Invalid arguments are never replaced by defaults; a default only applies when
the argument is absent and the strategy declares one.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple

import numpy as np

from fakeframe.python_libs.common.constants import MAX_SMALL_UINT
from fakeframe.python_libs.common.exceptions import (
    ErrorContext,
    InvalidArgumentValueError,
    InvalidRangeError,
    InvalidTimestampError,
    MissingArgumentError,
)

RANGE_KEY = "range"
RANGE_START_KEY = "start"
RANGE_END_KEY = "end"


class ArgumentResolver:
    """Resolves typed arguments for one column."""

    def __init__(self, column_name: str, args: Optional[Mapping[str, Any]] = None):
        self.column_name = column_name
        self.args: Mapping[str, Any] = args or {}

    def _context(self, key: str) -> ErrorContext:
        return ErrorContext(column_name=self.column_name, argument=key)

    def get_string(self, key: str) -> str:
        """Return ``args[key]`` as a string. Other kinds are not coerced."""
        value = self.args.get(key)
        if not isinstance(value, str):
            raise MissingArgumentError(f"Missing '{key}' argument", self._context(key))
        return value

    def get_small_uint(self, key: str) -> int:
        """Return ``args[key]`` as an integer in 0..255."""
        value = self.args.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise MissingArgumentError(f"Invalid '{key}' argument", self._context(key))
        if not 0 <= value <= MAX_SMALL_UINT:
            raise InvalidArgumentValueError(
                f"'{key}' must be between 0 and {MAX_SMALL_UINT}, got {value}",
                self._context(key),
            )
        return value

    def get_range(self, dtype: Any, default_start: Any, default_end: Any) -> Tuple[Any, Any]:
        """
        Return the ``(start, end)`` pair from ``args.range``.

        Args:
            dtype: numpy dtype (or dtype name) whose domain the bounds must fit
            default_start: value used when ``range.start`` is absent
            default_end: value used when ``range.end`` is absent

        Raises:
            InvalidArgumentValueError: a bound cannot be parsed into ``dtype``
            InvalidRangeError: ``start`` is greater than ``end``
        """
        dtype = np.dtype(dtype)
        range_args = self.args.get(RANGE_KEY)
        if range_args is None:
            range_args = {}
        elif not isinstance(range_args, Mapping):
            raise InvalidArgumentValueError(
                "'range' argument must be an object", self._context(RANGE_KEY)
            )

        start = default_start
        if RANGE_START_KEY in range_args:
            start = self._parse_bound(range_args[RANGE_START_KEY], dtype, RANGE_START_KEY)

        end = default_end
        if RANGE_END_KEY in range_args:
            end = self._parse_bound(range_args[RANGE_END_KEY], dtype, RANGE_END_KEY)

        if not start <= end:
            raise InvalidRangeError(
                f"'start' must be less than or equal to 'end' (start={start}, end={end})",
                self._context(RANGE_KEY),
            )
        return start, end

    def _parse_bound(self, value: Any, dtype: np.dtype, bound: str) -> Any:
        key = f"{RANGE_KEY}.{bound}"
        if dtype.kind in "iu":
            return self._parse_int_bound(value, dtype, key)
        return self._parse_float_bound(value, dtype, key)

    def _parse_int_bound(self, value: Any, dtype: np.dtype, key: str) -> int:
        if isinstance(value, bool):
            raise InvalidArgumentValueError("Invalid range value type", self._context(key))
        if isinstance(value, int):
            parsed = value
        elif isinstance(value, str):
            try:
                parsed = int(value.strip())
            except ValueError:
                raise InvalidArgumentValueError(
                    f"Invalid string range value '{value}'", self._context(key)
                ) from None
        elif isinstance(value, float):
            raise InvalidArgumentValueError(
                f"Invalid numeric range value {value} for {dtype.name}", self._context(key)
            )
        else:
            raise InvalidArgumentValueError("Invalid range value type", self._context(key))

        info = np.iinfo(dtype)
        if not int(info.min) <= parsed <= int(info.max):
            raise InvalidArgumentValueError(
                f"Range value {parsed} is outside the {dtype.name} domain",
                self._context(key),
            )
        return parsed

    def _parse_float_bound(self, value: Any, dtype: np.dtype, key: str) -> float:
        if isinstance(value, bool):
            raise InvalidArgumentValueError("Invalid range value type", self._context(key))
        if isinstance(value, (int, float)):
            parsed = float(value)
        elif isinstance(value, str):
            try:
                parsed = float(value.strip())
            except ValueError:
                raise InvalidArgumentValueError(
                    f"Invalid string range value '{value}'", self._context(key)
                ) from None
        else:
            raise InvalidArgumentValueError("Invalid range value type", self._context(key))

        # Round to the storage precision so sampled values stay within the bounds
        if dtype == np.float32:
            with np.errstate(over="ignore"):
                parsed = float(np.float32(parsed))
        if not math.isfinite(parsed):
            raise InvalidArgumentValueError(
                f"Range value {value} is not a finite {dtype.name}", self._context(key)
            )
        return parsed

    def get_timestamp(self, key: str) -> datetime:
        """Return ``args[key]`` parsed as an RFC-3339 timestamp in UTC."""
        value = self.args.get(key)
        if not isinstance(value, str):
            raise InvalidTimestampError(f"Invalid '{key}' datetime", self._context(key))
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidTimestampError(
                f"Invalid '{key}' datetime '{value}'", self._context(key)
            ) from None
        if parsed.tzinfo is None:
            raise InvalidTimestampError(
                f"Datetime '{value}' for '{key}' has no UTC offset", self._context(key)
            )
        return parsed.astimezone(timezone.utc)

    def get_timestamp_range(
        self, start_key: str = RANGE_START_KEY, end_key: str = RANGE_END_KEY
    ) -> Tuple[datetime, datetime]:
        """Return ``(start, end)`` timestamps read from ``args[start_key]`` and ``args[end_key]``."""
        start = self.get_timestamp(start_key)
        end = self.get_timestamp(end_key)
        if start > end:
            raise InvalidRangeError("Invalid datetime range", self._context(start_key))
        return start, end
