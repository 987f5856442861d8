"""
Test configuration - ensures repo root is in sys.path and gives every test
a clean schedule.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import astro_schedule and tests.fixtures
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from astro_schedule.schedule import ScheduleRegistry, reset_registry  # noqa: E402
from tests.fixtures import RecordingNotifier  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_singleton(monkeypatch, tmp_path):
    """Fresh process-wide registry and an empty app home per test."""
    monkeypatch.setenv("ASTRO_SCHEDULE_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("ASTRO_SCHEDULE_LOG_LEVEL", raising=False)
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def recorder():
    return RecordingNotifier()


@pytest.fixture
def registry(recorder):
    return ScheduleRegistry(notifiers=[recorder])
