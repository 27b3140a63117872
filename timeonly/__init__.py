"""
timeonly - a time-of-day value type independent of date and time zone.
"""

from .adapters.source_time import DateKind, SourceTime
from .domain.exceptions import (
    InvalidArgumentError,
    ParseFailureError,
    TimeOnlyError,
    UnknownWindowError,
    UnrepresentableValueError,
    UnsupportedFormatError,
)
from .domain.time_only import MILLISECONDS_PER_DAY, SUPPORTED_FORMATS, TimeOnly
from .services.time_windows import TimeWindow, TimeWindowService

__version__ = "0.1.0"

__all__ = [
    "DateKind",
    "SourceTime",
    "TimeOnly",
    "TimeOnlyError",
    "InvalidArgumentError",
    "UnrepresentableValueError",
    "UnsupportedFormatError",
    "ParseFailureError",
    "UnknownWindowError",
    "TimeWindow",
    "TimeWindowService",
    "MILLISECONDS_PER_DAY",
    "SUPPORTED_FORMATS",
]
