"""
Schedule engine.

Objects:
- Activity (description, [start, end) in minutes, priority, completed)
- ScheduleRegistry (the day's activities + conflict notifiers)

Invariants:
- No two activities overlap; touching endpoints are allowed
- Completion is one-way
- Lookup by description is case-insensitive, first match wins
"""

from .activity import Activity
from .notifier import (
    CallbackNotifier,
    ConflictNotifier,
    ConsoleNotifier,
    LoggingNotifier,
)
from .registry import ScheduleRegistry, get_registry, reset_registry
from .results import ListingResult, ResultStatus, ScheduleResult
from .timeparse import InvalidTimeFormat, format_minutes, is_valid_time, parse_time, to_minutes

__all__ = [
    "Activity",
    "ScheduleRegistry",
    "get_registry",
    "reset_registry",
    "ConflictNotifier",
    "ConsoleNotifier",
    "LoggingNotifier",
    "CallbackNotifier",
    "ResultStatus",
    "ScheduleResult",
    "ListingResult",
    "InvalidTimeFormat",
    "parse_time",
    "to_minutes",
    "format_minutes",
    "is_valid_time",
]
