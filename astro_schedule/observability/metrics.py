"""
In-process metrics for the scheduler.

Counters only go up; gauges hold the latest value. The shell can dump
them with to_prometheus(); tests read .value directly.
"""

import threading
from dataclasses import dataclass, field


@dataclass
class Counter:
    """Monotonic counter, safe to bump from any thread."""

    name: str
    description: str = ""
    _value: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    kind = "counter"

    def inc(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"Counter {self.name} cannot decrease")
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        return self._value


@dataclass
class Gauge:
    """Point-in-time value."""

    name: str
    description: str = ""
    _value: float = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    kind = "gauge"

    def set(self, value: float) -> None:
        with self._lock:
            self._value = value

    def inc(self, amount: float = 1) -> None:
        with self._lock:
            self._value += amount

    def dec(self, amount: float = 1) -> None:
        self.inc(-amount)

    @property
    def value(self) -> float:
        return self._value


class MetricsRegistry:
    """Named metrics, created on first request and shared afterwards."""

    def __init__(self) -> None:
        self._metrics: dict[str, Counter | Gauge] = {}
        self._lock = threading.Lock()

    def _get_or_create(self, cls, name: str, description: str):
        with self._lock:
            metric = self._metrics.get(name)
            if metric is None:
                metric = self._metrics[name] = cls(name, description)
            elif not isinstance(metric, cls):
                raise TypeError(f"Metric {name} already registered as a {metric.kind}")
            return metric

    def counter(self, name: str, description: str = "") -> Counter:
        return self._get_or_create(Counter, name, description)

    def gauge(self, name: str, description: str = "") -> Gauge:
        return self._get_or_create(Gauge, name, description)

    def _sorted(self) -> list[Counter | Gauge]:
        with self._lock:
            return [self._metrics[name] for name in sorted(self._metrics)]

    def to_prometheus(self) -> str:
        """Prometheus text exposition format."""
        lines: list[str] = []
        for metric in self._sorted():
            if metric.description:
                lines.append(f"# HELP {metric.name} {metric.description}")
            lines.append(f"# TYPE {metric.name} {metric.kind}")
            lines.append(f"{metric.name} {metric.value}")
        return "\n".join(lines) + "\n"


REGISTRY = MetricsRegistry()

tasks_added = REGISTRY.counter("tasks_added_total", "Activities added to the schedule")
tasks_removed = REGISTRY.counter("tasks_removed_total", "Activities removed from the schedule")
tasks_completed = REGISTRY.counter("tasks_completed_total", "Activities marked completed")
conflicts = REGISTRY.counter("conflicts_total", "Adds rejected for overlapping another activity")
validation_failures = REGISTRY.counter(
    "validation_failures_total", "Adds rejected for bad time format or interval"
)
scheduled_tasks = REGISTRY.gauge("scheduled_tasks", "Activities currently in the schedule")
