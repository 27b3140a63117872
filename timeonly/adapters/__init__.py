"""
Adapters layer - Reading clock fields from external date/time values.
"""

from .source_time import DateKind, SourceTime, infer_kind, read_clock_fields

__all__ = ["DateKind", "SourceTime", "infer_kind", "read_clock_fields"]
