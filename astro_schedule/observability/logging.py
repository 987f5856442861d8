"""
Log formatting for the scheduler.

Records go to stderr, never stdout, so the shell's menu output stays
clean. JSON lines when piped, a one-line human format on a terminal.
"""

import json
import logging
import sys
import time
from typing import TextIO

from .context import get_session_id

# Attributes every LogRecord has; anything else came in through `extra=`
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def _extras(record: logging.LogRecord) -> dict:
    return {k: v for k, v in vars(record).items() if k not in _STANDARD_ATTRS}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record:

    {"ts": "2024-01-15T10:30:00.123Z", "level": "INFO",
     "logger": "astro_schedule.schedule.registry", "msg": "Task added: ...",
     "session": "sess-...", "task_id": "task_..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        entry = {
            "ts": f"{stamp}.{int(record.msecs):03d}Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        session = get_session_id()
        if session:
            entry["session"] = session
        entry.update(_extras(record))
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """`2024-01-15 10:30:00 WARNING registry [sess-0123456] message`"""

    def format(self, record: logging.LogRecord) -> str:
        when = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        short_name = record.name.rsplit(".", 1)[-1]
        session = get_session_id()
        tag = f" [{session[:12]}]" if session else ""
        line = f"{when} {record.levelname} {short_name}{tag} {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: str = "WARNING",
    json_format: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Install a single handler on the root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case)
        json_format: Force JSON (True) or human (False); None picks JSON
            unless the stream is a terminal.
        stream: Defaults to stderr.

    Raises:
        ValueError: unknown level name.
    """
    numeric = logging.getLevelNamesMapping().get(level.upper())
    if numeric is None:
        raise ValueError(f"Unknown log level: {level!r}")

    stream = stream or sys.stderr
    if json_format is None:
        json_format = not stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(numeric)
