"""
Activity - one scheduled interval in the astronaut's day.
"""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .timeparse import format_minutes


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _new_id() -> str:
    return f"task_{uuid.uuid4().hex[:12]}"


@dataclass
class Activity:
    """
    A half-open interval [start_minutes, end_minutes) with a label.

    Instances are created by ScheduleRegistry.add_task only. The interval
    and description never change after creation; completion is the only
    mutation.
    """

    description: str
    start_minutes: int
    end_minutes: int
    priority: str
    completed: bool = False
    id: str = field(default_factory=_new_id)
    created_at: str = field(default_factory=_now)
    completed_at: str | None = None

    @property
    def start_time(self) -> str:
        return format_minutes(self.start_minutes)

    @property
    def end_time(self) -> str:
        return format_minutes(self.end_minutes)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def overlaps(self, start_minutes: int, end_minutes: int) -> bool:
        """Touching endpoints do not overlap."""
        return start_minutes < self.end_minutes and end_minutes > self.start_minutes

    def matches_description(self, description: str) -> bool:
        return self.description.casefold() == description.casefold()

    def has_priority(self, priority: str) -> bool:
        return self.priority.casefold() == priority.casefold()

    def mark_completed(self) -> None:
        """Scheduled -> Completed. Repeated calls keep the first timestamp."""
        if not self.completed:
            self.completed = True
            self.completed_at = _now()

    def __str__(self) -> str:
        status = " (Completed)" if self.completed else ""
        return (
            f"{self.start_time} - {self.end_time}: "
            f"{self.description} [{self.priority}]{status}"
        )
