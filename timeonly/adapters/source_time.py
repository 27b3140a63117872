"""
Adapter for reading clock fields out of external date/time values.

A source moment is a ``datetime`` (pendulum ``DateTime`` included) together
with a locality flag telling whether its UTC or its local fields apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple, Union

import pendulum

logger = logging.getLogger(__name__)


class DateKind(Enum):
    """Locality flag of a source moment."""
    UNSPECIFIED = 0
    UTC = 1
    LOCAL = 2


@dataclass(frozen=True)
class SourceTime:
    """
    A moment paired with the locality flag used to read its clock fields.

    ``UTC`` reads the moment converted to UTC (a naive moment is taken to
    already be UTC). ``LOCAL`` and ``UNSPECIFIED`` read the wall clock the
    moment carries.
    """
    moment: datetime
    kind: DateKind = DateKind.UNSPECIFIED

    @classmethod
    def of(cls, moment: datetime) -> "SourceTime":
        """Wrap a moment, inferring its kind from its tzinfo."""
        return cls(moment=moment, kind=infer_kind(moment))

    @classmethod
    def in_timezone(cls, moment: datetime, timezone: str) -> "SourceTime":
        """Convert an aware moment to a named zone and mark it local."""
        converted = pendulum.instance(moment).in_timezone(timezone)
        return cls(moment=converted, kind=DateKind.LOCAL)

    @classmethod
    def now(cls, timezone: str = "UTC") -> "SourceTime":
        """The current moment in the given zone."""
        moment = pendulum.now(timezone)
        kind = DateKind.UTC if _is_utc(moment) else DateKind.LOCAL
        return cls(moment=moment, kind=kind)


def _is_utc(moment: datetime) -> bool:
    return moment.utcoffset() == timedelta(0) and moment.tzname() == "UTC"


def infer_kind(moment: datetime) -> DateKind:
    """UTC for UTC-zoned moments, LOCAL for other aware ones, UNSPECIFIED for naive."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        return DateKind.UNSPECIFIED
    if _is_utc(moment):
        return DateKind.UTC
    return DateKind.LOCAL


def read_clock_fields(ref: Union[SourceTime, datetime]) -> Tuple[int, int, int, int]:
    """
    Return ``(hour, minute, second, millisecond)`` for a source moment.

    Args:
        ref: A SourceTime, or a bare datetime whose kind is inferred

    Returns:
        The four clock fields, milliseconds truncated from microseconds
    """
    if not isinstance(ref, SourceTime):
        ref = SourceTime.of(ref)

    moment = ref.moment
    if ref.kind is DateKind.UTC and moment.tzinfo is not None:
        moment = pendulum.instance(moment).in_timezone("UTC")

    logger.debug("Reading %s clock fields from %s", ref.kind.name, moment.isoformat())
    return moment.hour, moment.minute, moment.second, moment.microsecond // 1000
