"""
Schedule Registry - the owning collection for one day's activities.

Enforces the core invariant: no two activities in the registry have
overlapping [start, end) intervals. Touching endpoints are allowed.

Not thread-safe. Callers sharing a registry across threads must serialize
access themselves.
"""

import copy
import logging

from astro_schedule.observability import metrics

from .activity import Activity
from .notifier import ConflictNotifier, as_notifier
from .results import ListingResult, ResultStatus, ScheduleResult
from .timeparse import InvalidTimeFormat, parse_time

logger = logging.getLogger(__name__)


class ScheduleRegistry:
    """
    In-memory schedule for a single actor and a single day.

    Responsibilities:
    - Validate time strings and intervals
    - Detect overlap and broadcast conflicts to notifiers
    - Add, remove and complete activities (description is the lookup key)
    - Produce sorted or filtered listings
    """

    def __init__(self, notifiers=None):
        self._tasks: list[Activity] = []
        self._notifiers: list[ConflictNotifier] = []
        for notifier in notifiers or []:
            self.add_notifier(notifier)

    # ------------------------------------------------------------------
    # Notifiers
    # ------------------------------------------------------------------

    def add_notifier(self, notifier) -> ConflictNotifier:
        """
        Register a notifier (or plain callable) for conflict messages.

        Notifiers are called in registration order. Returns the registered
        notifier, which is a CallbackNotifier when a callable was passed.
        """
        registered = as_notifier(notifier)
        self._notifiers.append(registered)
        logger.debug(f"Registered conflict notifier {registered!r}")
        return registered

    @property
    def notifiers(self) -> list[ConflictNotifier]:
        return list(self._notifiers)

    def _notify_conflict(self, message: str) -> None:
        for notifier in self._notifiers:
            notifier.notify_conflict(message)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_task(
        self, description: str, start_text: str, end_text: str, priority: str
    ) -> ScheduleResult:
        """
        Add an activity if its interval is valid and free.

        Checks, in order:
        - start then end time format (first bad field is reported)
        - start strictly before end
        - no overlap with any existing activity (first hit wins)

        Returns:
            ScheduleResult with SUCCESS, INVALID_TIME_FORMAT,
            INVALID_INTERVAL or CONFLICT
        """
        times = {}
        for field_name, text in (("start", start_text), ("end", end_text)):
            try:
                times[field_name] = parse_time(text)
            except InvalidTimeFormat as e:
                logger.debug(f"Rejected {field_name} time for {description!r}: {e}")
                metrics.validation_failures.inc()
                return ScheduleResult(
                    status=ResultStatus.INVALID_TIME_FORMAT,
                    message="Invalid time format.",
                    field=field_name,
                )

        start, end = times["start"], times["end"]
        if start >= end:
            logger.debug(f"Rejected interval {start_text}-{end_text} for {description!r}")
            metrics.validation_failures.inc()
            return ScheduleResult(
                status=ResultStatus.INVALID_INTERVAL,
                message="Start time must be before end time.",
            )

        clash = self._find_overlap(start, end)
        if clash is not None:
            message = f'Task conflicts with existing task "{clash.description}".'
            logger.info(
                f"Conflict adding {description!r} {start_text}-{end_text}",
                extra={"conflict_with": clash.description},
            )
            metrics.conflicts.inc()
            self._notify_conflict(message)
            return ScheduleResult(
                status=ResultStatus.CONFLICT,
                message=message,
                conflict_with=clash.description,
            )

        task = Activity(
            description=description,
            start_minutes=start,
            end_minutes=end,
            priority=priority,
        )
        self._tasks.append(task)
        metrics.tasks_added.inc()
        self._track_size()
        logger.info(
            f"Task added: {task}",
            extra={"task_id": task.id, "description": description},
        )
        return ScheduleResult(
            status=ResultStatus.SUCCESS,
            message="Task added successfully. No conflicts.",
            activity=copy.copy(task),
        )

    def remove_task(self, description: str) -> ScheduleResult:
        """Remove the first activity whose description matches (case-insensitive)."""
        index = self._index_of(description)
        if index is None:
            logger.debug(f"Remove: no task matching {description!r}")
            return ScheduleResult(status=ResultStatus.NOT_FOUND, message="Task not found.")

        task = self._tasks.pop(index)
        metrics.tasks_removed.inc()
        self._track_size()
        logger.info(f"Task removed: {task}", extra={"task_id": task.id})
        return ScheduleResult(
            status=ResultStatus.SUCCESS,
            message="Task removed successfully.",
            activity=task,
        )

    def mark_completed(self, description: str) -> ScheduleResult:
        """Mark the first matching activity completed. Idempotent."""
        index = self._index_of(description)
        if index is None:
            logger.debug(f"Complete: no task matching {description!r}")
            return ScheduleResult(status=ResultStatus.NOT_FOUND, message="Task not found.")

        task = self._tasks[index]
        if not task.completed:
            task.mark_completed()
            metrics.tasks_completed.inc()
            logger.info(f"Task completed: {task}", extra={"task_id": task.id})
        return ScheduleResult(
            status=ResultStatus.SUCCESS,
            message="Task marked as completed.",
            activity=copy.copy(task),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> ListingResult:
        """All activities ordered by start time, or EMPTY."""
        if not self._tasks:
            return ListingResult(status=ResultStatus.EMPTY)
        ordered = sorted(self._tasks, key=lambda t: t.start_minutes)
        return ListingResult(
            status=ResultStatus.SUCCESS,
            activities=[copy.copy(t) for t in ordered],
        )

    def list_by_priority(self, priority: str) -> ListingResult:
        """Activities whose priority matches (case-insensitive), in collection order."""
        matches = [copy.copy(t) for t in self._tasks if t.has_priority(priority)]
        if not matches:
            return ListingResult(status=ResultStatus.EMPTY, query=priority)
        return ListingResult(status=ResultStatus.SUCCESS, activities=matches, query=priority)

    def find_task(self, description: str) -> Activity | None:
        index = self._index_of(description)
        return copy.copy(self._tasks[index]) if index is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _track_size(self) -> None:
        # The gauge is process-wide; only the shared registry owns it
        if self is _registry:
            metrics.scheduled_tasks.set(len(self._tasks))

    def _find_overlap(self, start: int, end: int) -> Activity | None:
        for task in self._tasks:
            if task.overlaps(start, end):
                return task
        return None

    def _index_of(self, description: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.matches_description(description):
                return i
        return None


_registry: ScheduleRegistry | None = None


def get_registry() -> ScheduleRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        _registry = ScheduleRegistry()
        logger.debug("Created process-wide schedule registry")
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry. Intended for tests."""
    global _registry
    _registry = None
    metrics.scheduled_tasks.set(0)
