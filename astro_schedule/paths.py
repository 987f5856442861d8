from __future__ import annotations

import os
from pathlib import Path

APP_ENV_HOME = "ASTRO_SCHEDULE_HOME"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains astro_schedule/, config/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def app_home() -> Path:
    """
    User-writable home for the scheduler.
    Override with ASTRO_SCHEDULE_HOME.
    """
    if os.environ.get(APP_ENV_HOME):
        return Path(os.environ[APP_ENV_HOME]).expanduser().resolve()
    return (Path.home() / ".astro_schedule").resolve()


def config_dir() -> Path:
    """Per-user config directory (not created until something is written)."""
    return app_home() / "config"


def default_settings_path() -> Path:
    """
    Settings file used when no --config is given.

    Resolution order:
    1. <app_home>/config/schedule.yaml (user override)
    2. <project_root>/config/schedule.yaml (shipped default)
    """
    user_file = config_dir() / "schedule.yaml"
    if user_file.exists():
        return user_file
    return project_root() / "config" / "schedule.yaml"
