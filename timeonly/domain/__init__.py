"""
Domain layer - The TimeOnly value type and its errors.
"""

from .exceptions import (
    InvalidArgumentError,
    ParseFailureError,
    TimeOnlyError,
    UnknownWindowError,
    UnrepresentableValueError,
    UnsupportedFormatError,
)
from .time_only import TimeOnly

__all__ = [
    "TimeOnly",
    "TimeOnlyError",
    "InvalidArgumentError",
    "UnrepresentableValueError",
    "UnsupportedFormatError",
    "ParseFailureError",
    "UnknownWindowError",
]
