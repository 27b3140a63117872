"""
Tests for time windows and the window service.
"""

import pendulum
import pytest

from timeonly.domain.exceptions import UnknownWindowError
from timeonly.domain.time_only import TimeOnly
from timeonly.services.time_windows import TimeWindow, TimeWindowService


def _window(name: str, start: str, end: str) -> TimeWindow:
    return TimeWindow(name=name, start=TimeOnly.parse(start), end=TimeOnly.parse(end))


class TestTimeWindow:
    """Tests for TimeWindow."""

    def test_daytime_window(self):
        """Test containment and length of a daytime window."""
        office = _window("office", "09:00", "17:00")

        assert not office.is_overnight
        assert office.contains(TimeOnly.create(9))
        assert not office.contains(TimeOnly.create(17))
        assert office.duration_minutes() == 480

    def test_overnight_window(self):
        """Test a window that runs across midnight."""
        night = _window("night", "22:00", "06:00")

        assert night.is_overnight
        assert night.contains(TimeOnly.create(23, 30))
        assert night.contains(TimeOnly.create(1))
        assert not night.contains(TimeOnly.create(12))
        assert night.duration_minutes() == 480

    def test_empty_window(self):
        """Test a window starting where it ends."""
        empty = _window("empty", "12:00", "12:00")

        assert empty.duration_minutes() == 0
        assert not empty.contains(TimeOnly.create(12))

    def test_str(self):
        """Test the display string."""
        assert str(_window("night", "22:00", "06:00")) == "night: 22:00 - 06:00"


class TestTimeWindowService:
    """Tests for TimeWindowService."""

    @pytest.fixture
    def service(self) -> TimeWindowService:
        return TimeWindowService([
            _window("office", "09:00", "17:00"),
            _window("night", "22:00", "06:00"),
            _window("lunch", "12:00", "13:00"),
        ])

    def test_active_windows(self, service):
        """Test every window containing the time is returned in order."""
        names = [w.name for w in service.active_windows(TimeOnly.create(12, 30))]

        assert names == ["office", "lunch"]
        assert [w.name for w in service.active_windows(TimeOnly.create(3))] == ["night"]
        assert service.active_windows(TimeOnly.create(20)) == []

    def test_active_windows_from_moment(self, service):
        """Test source moments are converted with their wall clock."""
        moment = pendulum.datetime(2024, 11, 25, 23, 0, tz="Europe/Berlin")

        assert [w.name for w in service.active_windows(moment)] == ["night"]

    def test_is_open(self, service):
        """Test checking a single window by name."""
        assert service.is_open("night", TimeOnly.create(5, 59))
        assert not service.is_open("night", TimeOnly.create(6))

    def test_unknown_window(self, service):
        """Test looking up a missing window raises UnknownWindowError."""
        with pytest.raises(UnknownWindowError, match="weekend"):
            service.is_open("weekend", TimeOnly.create(12))

    def test_duplicate_names_rejected(self):
        """Test two windows with the same name raise ValueError."""
        with pytest.raises(ValueError, match="Duplicate window name"):
            TimeWindowService([_window("a", "01:00", "02:00"), _window("a", "03:00", "04:00")])
