"""
Shell session tracking for log correlation.

One interactive run of the shell is one session; every record logged
inside it carries the same id.
"""

import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

_current_session: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "astro_schedule_session", default=None
)


def get_session_id() -> str | None:
    return _current_session.get()


def new_session_id() -> str:
    return f"sess-{uuid.uuid4().hex[:16]}"


@contextmanager
def shell_session(session_id: str | None = None) -> Iterator[str]:
    """Bind a session id for the duration of the block and yield it."""
    sid = session_id or new_session_id()
    token = _current_session.set(sid)
    try:
        yield sid
    finally:
        _current_session.reset(token)
