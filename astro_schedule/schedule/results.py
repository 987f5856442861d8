"""
Typed outcomes for schedule operations.

Registry operations never print and never raise for bad user input; they
return one of these and let the caller decide how to present it.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from .activity import Activity


class ResultStatus(StrEnum):
    SUCCESS = "success"
    EMPTY = "empty"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_INTERVAL = "invalid_interval"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass
class ScheduleResult:
    """Result of a single mutating operation."""

    status: ResultStatus
    message: str
    activity: Activity | None = None
    conflict_with: str | None = None  # Description of the clashing activity
    field: str | None = None  # "start" or "end" for INVALID_TIME_FORMAT

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS


@dataclass
class ListingResult:
    """
    Result of a listing operation.

    status is EMPTY when nothing matched, so callers can tell
    "no tasks at all" from "no tasks with this priority" via `query`.
    """

    status: ResultStatus
    activities: list[Activity] = field(default_factory=list)
    query: str | None = None  # Priority filter, if any

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_empty(self) -> bool:
        return self.status == ResultStatus.EMPTY

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.activities)

    def __len__(self) -> int:
        return len(self.activities)
