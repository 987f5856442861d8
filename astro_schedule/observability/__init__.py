"""
Observability: log formatting, shell session ids, in-process metrics.

Usage:
    from astro_schedule.observability import configure_logging, shell_session

    configure_logging("INFO")
    with shell_session():
        logger.info("Task added", extra={"task_id": "task_abc"})

Metrics:
    from astro_schedule.observability import REGISTRY

    print(REGISTRY.to_prometheus())
"""

from .context import shell_session
from .logging import HumanFormatter, JSONFormatter, configure_logging
from .metrics import REGISTRY, Counter, Gauge, MetricsRegistry

__all__ = [
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    "shell_session",
    "REGISTRY",
    "Counter",
    "Gauge",
    "MetricsRegistry",
]
