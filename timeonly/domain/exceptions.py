"""
Domain-specific exception hierarchy for the timeonly package.
"""


class TimeOnlyError(Exception):
    """Base class for all timeonly errors."""


class InvalidArgumentError(TimeOnlyError, ValueError):
    """Raised when a time component passed to ``TimeOnly.create`` is negative."""


class UnrepresentableValueError(TimeOnlyError, ValueError):
    """Raised when a duration does not fit within a single day."""


class UnsupportedFormatError(TimeOnlyError, ValueError):
    """Raised when a format token other than r, R, o, O, t or T is requested."""


class ParseFailureError(TimeOnlyError, ValueError):
    """Raised when text cannot be parsed as a time of day."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"String '{text}' was not recognized as a valid TimeOnly.")


class UnknownWindowError(TimeOnlyError, KeyError):
    """Raised when a time window is looked up by a name nobody configured."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
