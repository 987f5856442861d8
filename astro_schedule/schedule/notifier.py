"""
Conflict notifiers.

The registry broadcasts a human-readable message to every registered
notifier, in registration order, whenever an add is rejected for overlap.
Delivery is the notifier's concern.
"""

import logging
import sys
from collections.abc import Callable
from typing import Protocol, TextIO, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ConflictNotifier(Protocol):
    def notify_conflict(self, message: str) -> None: ...


class ConsoleNotifier:
    """Writes "Error: <message>" lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def notify_conflict(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"Error: {message}\n")
        stream.flush()


class LoggingNotifier:
    """Routes conflict messages to a logger at WARNING level."""

    def __init__(self, log: logging.Logger | None = None):
        self._logger = log or logger

    def notify_conflict(self, message: str) -> None:
        self._logger.warning(message, extra={"event": "schedule_conflict"})


class CallbackNotifier:
    """Adapts a plain callable to the notifier interface."""

    def __init__(self, callback: Callable[[str], None]):
        self.callback = callback

    def notify_conflict(self, message: str) -> None:
        self.callback(message)

    def __repr__(self) -> str:
        return f"CallbackNotifier({self.callback!r})"


def as_notifier(obj) -> ConflictNotifier:
    """Accept a notifier object or a bare callable."""
    if isinstance(obj, ConflictNotifier):
        return obj
    if callable(obj):
        return CallbackNotifier(obj)
    raise TypeError(f"Not a conflict notifier or callable: {obj!r}")
