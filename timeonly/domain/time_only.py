"""
The TimeOnly value type: a point on the 24-hour clock without date or zone.

A TimeOnly is nothing but a count of milliseconds since midnight. Every
operation in this module is a pure function over that count, so values can be
shared freely between threads and compared, hashed and sorted like integers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Optional, Tuple, Union

from ..adapters.source_time import SourceTime, read_clock_fields
from .exceptions import (
    InvalidArgumentError,
    ParseFailureError,
    UnrepresentableValueError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)


MILLISECONDS_PER_SECOND = 1_000
MILLISECONDS_PER_MINUTE = 60_000
MILLISECONDS_PER_HOUR = 3_600_000
MILLISECONDS_PER_DAY = 86_400_000
TICKS_PER_MILLISECOND = 10_000

SUPPORTED_FORMATS = ("r", "R", "o", "O", "t", "T")

# hh:mm, hh:mm:ss or hh:mm:ss.fffffff
_TIME_PATTERN = re.compile(
    r"^\s*([0-1]?[0-9]|2[0-3])\s*:\s*([0-5]?[0-9])(\s*:\s*([0-5]?[0-9])(\.([0-9]+))?)?\s*$"
)

Delta = Union["TimeOnly", int, timedelta]

_ONE_MICROSECOND = timedelta(microseconds=1)


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _to_milliseconds(value: Delta) -> int:
    if isinstance(value, TimeOnly):
        return value.milliseconds
    if isinstance(value, timedelta):
        # Base-class division; pendulum Durations override __floordiv__
        return _truncating_div(timedelta.__floordiv__(value, _ONE_MICROSECOND), 1000)
    if isinstance(value, int):
        return value
    raise TypeError(f"Expected milliseconds, timedelta or TimeOnly, got {type(value).__name__}")


def _fraction_to_milliseconds(digits: str) -> int:
    """Scale a fractional-second digit group to whole milliseconds."""
    count = len(digits)
    if count == 1:
        return int(digits) * 100
    if count == 2:
        return int(digits) * 10
    if count == 3:
        return int(digits)
    if count == 4:
        return int(digits) // 10
    if count == 5:
        return int(digits) // 100
    if count == 6:
        return int(digits) // 1000
    return int(digits[:7]) // 10_000


@dataclass(frozen=True, order=True, repr=False)
class TimeOnly:
    """
    Represents an immutable time of day with millisecond precision.

    Invariant: values returned by normalising operations (arithmetic,
    ``from_time_span``, ``parse``) satisfy ``0 <= milliseconds < 86_400_000``.
    ``create`` and ``from_ticks`` do not bound-check their result.
    """
    milliseconds: int = 0

    # -- construction -----------------------------------------------------

    @classmethod
    def create(cls, hours: int = 0, minutes: int = 0, seconds: int = 0, milliseconds: int = 0) -> "TimeOnly":
        """
        Build a TimeOnly from its clock components.

        Components are only checked for being non-negative; larger values
        (e.g. ``minutes=90``) are folded into the total.

        Raises:
            InvalidArgumentError: If any component is negative
        """
        if hours < 0 or minutes < 0 or seconds < 0 or milliseconds < 0:
            raise InvalidArgumentError("The parameters describe an unrepresentable TimeOnly.")

        return cls(
            hours * MILLISECONDS_PER_HOUR
            + minutes * MILLISECONDS_PER_MINUTE
            + seconds * MILLISECONDS_PER_SECOND
            + milliseconds
        )

    @classmethod
    def from_ticks(cls, ticks: int) -> "TimeOnly":
        """Convert 100-nanosecond ticks to a TimeOnly, truncating toward zero."""
        return cls(_truncating_div(ticks, TICKS_PER_MILLISECOND))

    @classmethod
    def from_time_span(cls, duration: Union[int, timedelta]) -> "TimeOnly":
        """
        Interpret a duration since midnight as a TimeOnly.

        Raises:
            UnrepresentableValueError: If the duration is negative or a day or longer
        """
        total = _to_milliseconds(duration)
        if total < 0 or total >= MILLISECONDS_PER_DAY:
            raise UnrepresentableValueError("The TimeSpan describes an unrepresentable TimeOnly.")

        return cls(total)

    @classmethod
    def from_source_time(cls, ref: Union[SourceTime, datetime]) -> "TimeOnly":
        """Take the clock fields of a moment, read as UTC or local depending on its kind."""
        return cls.create(*read_clock_fields(ref))

    @classmethod
    def from_time(cls, value: time) -> "TimeOnly":
        """Convert a ``datetime.time``; microseconds are truncated to milliseconds."""
        return cls.create(value.hour, value.minute, value.second, value.microsecond // 1000)

    @classmethod
    def max_value(cls) -> "TimeOnly":
        """23:59:59.999"""
        return cls(MILLISECONDS_PER_DAY - 1)

    @classmethod
    def min_value(cls) -> "TimeOnly":
        return cls(0)

    # -- fields -----------------------------------------------------------

    @property
    def hour(self) -> int:
        return self.milliseconds // MILLISECONDS_PER_HOUR % 24

    @property
    def minute(self) -> int:
        return self.milliseconds // MILLISECONDS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self.milliseconds // MILLISECONDS_PER_SECOND % 60

    @property
    def millisecond(self) -> int:
        return self.milliseconds % MILLISECONDS_PER_SECOND

    @property
    def ticks(self) -> int:
        return self.milliseconds * TICKS_PER_MILLISECOND

    def to_time(self) -> time:
        """Convert to a ``datetime.time``."""
        return time(self.hour, self.minute, self.second, self.millisecond * 1000)

    # -- arithmetic -------------------------------------------------------

    def add(self, delta: Delta) -> "TimeOnly":
        """Add a duration, wrapping around midnight in either direction."""
        return TimeOnly((self.milliseconds + _to_milliseconds(delta)) % MILLISECONDS_PER_DAY)

    def add_with_overflow(self, delta: Delta) -> Tuple["TimeOnly", int]:
        """
        Add a duration and report how many whole days the result wrapped.

        Returns:
            Tuple of the wrapped TimeOnly and the signed number of days crossed
        """
        delta_ms = _to_milliseconds(delta)
        wrapped_days = _truncating_div(delta_ms, MILLISECONDS_PER_DAY)
        new_ms = self.milliseconds + (delta_ms - wrapped_days * MILLISECONDS_PER_DAY)

        if new_ms < 0:
            wrapped_days -= 1
            new_ms += MILLISECONDS_PER_DAY
        elif new_ms >= MILLISECONDS_PER_DAY:
            wrapped_days += 1
            new_ms -= MILLISECONDS_PER_DAY

        return TimeOnly(new_ms), wrapped_days

    def add_hours(self, hours: int) -> "TimeOnly":
        return self.add(hours * MILLISECONDS_PER_HOUR)

    def add_minutes(self, minutes: int) -> "TimeOnly":
        return self.add(minutes * MILLISECONDS_PER_MINUTE)

    def subtract(self, other: Delta) -> "TimeOnly":
        """Equivalent to ``add(-other)``."""
        return self.add(-_to_milliseconds(other))

    def __add__(self, other: Delta) -> "TimeOnly":
        if not isinstance(other, (int, timedelta)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Delta) -> "TimeOnly":
        if not isinstance(other, (TimeOnly, int, timedelta)):
            return NotImplemented
        return self.subtract(other)

    def __int__(self) -> int:
        return self.milliseconds

    # -- range test -------------------------------------------------------

    def is_between(self, start: "TimeOnly", end: "TimeOnly") -> bool:
        """
        Check whether this time lies in the half-open window ``[start, end)``.

        When ``start`` is later than ``end`` the window runs past midnight,
        e.g. 22:00-02:00 contains both 23:30 and 01:00.
        """
        if start <= end:
            return start <= self < end
        return start <= self or self < end

    # -- formatting -------------------------------------------------------

    def to_string(self, fmt: str = "t") -> str:
        """
        Format as ``HH:mm`` (t), ``HH:mm:ss`` (T, r, R) or ``HH:mm:ss.fffffff`` (o, O).

        Raises:
            UnsupportedFormatError: For any other format string
        """
        if fmt not in SUPPORTED_FORMATS:
            raise UnsupportedFormatError("Custom formats are not supported")

        base = f"{self.hour:02d}:{self.minute:02d}"
        if fmt == "t":
            return base

        if fmt in ("o", "O"):
            # Only millisecond precision is stored, the last 4 digits are always 0
            return f"{base}:{self.second:02d}.{self.millisecond:03d}0000"
        return f"{base}:{self.second:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or "t")

    def __repr__(self) -> str:
        return f"TimeOnly('{self.to_string('o')}')"

    # -- parsing ----------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "TimeOnly":
        """
        Parse ``HH:mm``, ``HH:mm:ss`` or ``HH:mm:ss.fraction``.

        Whitespace is allowed around the text and around the colons. Hours
        and minutes/seconds may have one or two digits.

        Raises:
            ParseFailureError: If the text does not match
        """
        match = _TIME_PATTERN.match(text)
        if match is None:
            raise ParseFailureError(text)

        hours = int(match.group(1))
        minutes = int(match.group(2))
        seconds = int(match.group(4)) if match.group(4) is not None else 0
        fraction = match.group(6)
        milliseconds = _fraction_to_milliseconds(fraction) if fraction is not None else 0

        return cls.create(hours, minutes, seconds, milliseconds)

    @classmethod
    def try_parse(cls, text: str) -> Tuple[bool, Optional["TimeOnly"]]:
        """Like ``parse`` but returns ``(False, None)`` instead of raising."""
        try:
            return True, cls.parse(text)
        except (ParseFailureError, TypeError) as exc:
            logger.debug("Could not parse %r as TimeOnly: %s", text, exc)
            return False, None
