"""
Named daily time windows and the service answering "which windows are open now?".

A window is a pair of TimeOnly values on the 24-hour clock. Windows whose
start lies after their end run across midnight (e.g. a 22:00-06:00 night
shift) and are evaluated with ``TimeOnly.is_between``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Sequence, Union

from ..adapters.source_time import SourceTime
from ..domain.exceptions import UnknownWindowError
from ..domain.time_only import MILLISECONDS_PER_DAY, MILLISECONDS_PER_MINUTE, TimeOnly

logger = logging.getLogger(__name__)

Moment = Union[TimeOnly, SourceTime, datetime]


@dataclass(frozen=True)
class TimeWindow:
    """
    Represents an immutable, possibly overnight, daily window ``[start, end)``.

    A window whose start equals its end is empty.
    """
    name: str
    start: TimeOnly
    end: TimeOnly

    @property
    def is_overnight(self) -> bool:
        return self.start > self.end

    def contains(self, t: TimeOnly) -> bool:
        """Check if a time of day falls inside this window."""
        return t.is_between(self.start, self.end)

    def duration_minutes(self) -> int:
        """Return the length of the window in minutes, measured around the clock."""
        length = (self.end.milliseconds - self.start.milliseconds) % MILLISECONDS_PER_DAY
        return length // MILLISECONDS_PER_MINUTE

    def __str__(self) -> str:
        return f"{self.name}: {self.start} - {self.end}"


def _as_time_only(at: Moment) -> TimeOnly:
    if isinstance(at, TimeOnly):
        return at
    return TimeOnly.from_source_time(at)


class TimeWindowService:
    """
    Evaluates a fixed set of windows against times of day or source moments.
    """

    def __init__(self, windows: Sequence[TimeWindow]):
        self._windows: Dict[str, TimeWindow] = {}
        for window in windows:
            if window.name in self._windows:
                raise ValueError(f"Duplicate window name: {window.name}")
            self._windows[window.name] = window

    @property
    def windows(self) -> List[TimeWindow]:
        return list(self._windows.values())

    def get(self, name: str) -> TimeWindow:
        """
        Look up a window by name.

        Raises:
            UnknownWindowError: If no window has that name
        """
        try:
            return self._windows[name]
        except KeyError:
            raise UnknownWindowError(f"Unknown time window: '{name}'") from None

    def is_open(self, name: str, at: Moment) -> bool:
        """Check whether the named window contains the given moment."""
        return self.get(name).contains(_as_time_only(at))

    def active_windows(self, at: Moment) -> List[TimeWindow]:
        """
        Return every window containing the given moment, in configuration order.
        """
        t = _as_time_only(at)
        active = [window for window in self._windows.values() if window.contains(t)]
        logger.debug("%d of %d windows open at %s", len(active), len(self._windows), t.to_string("T"))
        return active
