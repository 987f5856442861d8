"""
Tests for observability modules.

Covers:
- Logging: JSONFormatter, HumanFormatter, extra fields, session IDs
- configure_logging level handling
- Metrics: Counter, Gauge, MetricsRegistry exports
- Registry log output
"""

import io
import json
import logging

import pytest

from astro_schedule.observability.context import get_session_id, new_session_id, shell_session
from astro_schedule.observability.logging import (
    HumanFormatter,
    JSONFormatter,
    configure_logging,
)
from astro_schedule.observability.metrics import Counter, Gauge, MetricsRegistry
from astro_schedule.schedule import LoggingNotifier, ScheduleRegistry


def _record(msg="Task added", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="astro_schedule.schedule.registry",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestShellSession:
    def test_generated_ids_are_prefixed_and_unique(self):
        a, b = new_session_id(), new_session_id()
        assert a.startswith("sess-")
        assert a != b

    def test_binds_and_resets(self):
        assert get_session_id() is None
        with shell_session("sess-test") as sid:
            assert sid == "sess-test"
            assert get_session_id() == "sess-test"
        assert get_session_id() is None

    def test_generates_id_when_none_given(self):
        with shell_session() as sid:
            assert sid.startswith("sess-")
            assert get_session_id() == sid


class TestJSONFormatter:
    def test_basic_fields(self):
        record = _record()
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "INFO"
        assert data["logger"] == "astro_schedule.schedule.registry"
        assert data["msg"] == "Task added"
        assert data["ts"].endswith("Z")
        assert "session" not in data

    def test_timestamp_comes_from_record(self):
        record = _record()
        record.created = 0.0
        record.msecs = 250.0
        data = json.loads(JSONFormatter().format(record))
        assert data["ts"] == "1970-01-01T00:00:00.250Z"

    def test_extra_fields_included(self):
        data = json.loads(JSONFormatter().format(_record(task_id="task_abc", conflict_with="X")))
        assert data["task_id"] == "task_abc"
        assert data["conflict_with"] == "X"
        assert "pathname" not in data
        assert "args" not in data

    def test_session_included(self):
        with shell_session("sess-json"):
            data = json.loads(JSONFormatter().format(_record()))
        assert data["session"] == "sess-json"


class TestHumanFormatter:
    def test_format(self):
        line = HumanFormatter().format(_record())
        assert line.endswith("INFO registry Task added")

    def test_session_tag(self):
        with shell_session("sess-0123456789abcdef"):
            line = HumanFormatter().format(_record())
        assert line.endswith("INFO registry [sess-0123456] Task added")


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_is_case_insensitive(self):
        configure_logging("debug", json_format=True, stream=io.StringIO())
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="verbose"):
            configure_logging("verbose", stream=io.StringIO())

    def test_writes_json_to_stream(self):
        out = io.StringIO()
        configure_logging("INFO", json_format=True, stream=out)
        logging.getLogger("astro_schedule.test").info("hello", extra={"task_id": "t1"})
        data = json.loads(out.getvalue())
        assert data["msg"] == "hello"
        assert data["task_id"] == "t1"

    def test_single_handler_after_reconfigure(self):
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())
        assert len(logging.getLogger().handlers) == 1


class TestMetrics:
    def test_counter_and_gauge(self):
        c = Counter("c", "counter")
        c.inc()
        c.inc(2)
        assert c.value == 3

        g = Gauge("g", "gauge")
        g.set(5)
        g.inc()
        g.dec(2)
        assert g.value == 4

    def test_registry_get_or_create(self):
        reg = MetricsRegistry()
        assert reg.counter("x_total") is reg.counter("x_total")
        assert reg.gauge("y") is reg.gauge("y")

    def test_counter_rejects_decrease(self):
        with pytest.raises(ValueError):
            Counter("c").inc(-1)

    def test_name_reused_for_other_kind(self):
        reg = MetricsRegistry()
        reg.counter("x_total")
        with pytest.raises(TypeError):
            reg.gauge("x_total")

    def test_exports(self):
        reg = MetricsRegistry()
        reg.counter("conflicts_total", "Rejected adds").inc(2)
        reg.gauge("scheduled_tasks").set(3)

        text = reg.to_prometheus()
        assert "# HELP conflicts_total Rejected adds" in text
        assert "# TYPE conflicts_total counter" in text
        assert "conflicts_total 2" in text
        assert "scheduled_tasks 3" in text

        assert text.index("conflicts_total") < text.index("scheduled_tasks")


class TestRegistryLogging:
    def test_conflict_logged_once_at_info(self, caplog):
        registry = ScheduleRegistry()
        registry.add_task("Exercise", "07:00", "08:00", "High")
        caplog.clear()
        with caplog.at_level(logging.INFO, logger="astro_schedule"):
            registry.add_task("Meeting", "07:30", "08:30", "Medium")

        (record,) = caplog.records
        assert record.levelno == logging.INFO
        assert record.conflict_with == "Exercise"

    def test_logging_notifier_is_the_only_warning(self, caplog):
        registry = ScheduleRegistry(notifiers=[LoggingNotifier()])
        registry.add_task("Exercise", "07:00", "08:00", "High")
        with caplog.at_level(logging.INFO, logger="astro_schedule"):
            registry.add_task("Meeting", "07:30", "08:30", "Medium")

        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == 'Task conflicts with existing task "Exercise".'
        assert warnings[0].event == "schedule_conflict"

    def test_add_logged_as_info(self, caplog):
        registry = ScheduleRegistry()
        with caplog.at_level(logging.INFO, logger="astro_schedule.schedule.registry"):
            registry.add_task("Exercise", "07:00", "08:00", "High")
        assert any(r.getMessage().startswith("Task added") for r in caplog.records)
