"""
Service layer helpers built on the TimeOnly value type.
"""

from .time_windows import TimeWindow, TimeWindowService

__all__ = ["TimeWindow", "TimeWindowService"]
