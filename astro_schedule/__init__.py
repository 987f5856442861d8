# Astronaut Daily Schedule - Core Library
"""
Exports for the interactive shell and other consumers.
"""

from .schedule import (
    Activity,
    CallbackNotifier,
    ConflictNotifier,
    ConsoleNotifier,
    InvalidTimeFormat,
    ListingResult,
    LoggingNotifier,
    ResultStatus,
    ScheduleRegistry,
    ScheduleResult,
    get_registry,
    parse_time,
)

__version__ = "0.1.0"

__all__ = [
    "ScheduleRegistry",
    "get_registry",
    "Activity",
    "ResultStatus",
    "ScheduleResult",
    "ListingResult",
    "ConflictNotifier",
    "ConsoleNotifier",
    "LoggingNotifier",
    "CallbackNotifier",
    "InvalidTimeFormat",
    "parse_time",
]
