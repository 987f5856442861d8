"""
Centralized configuration for the astronaut scheduler.

Settings live in config/schedule.yaml:

    suggested_priorities: [High, Medium, Low]
    notifiers: [console]        # console | log
    log_level: INFO

ASTRO_SCHEDULE_LOG_LEVEL overrides log_level (file or default);
ASTRO_SCHEDULE_LOG_JSON forces JSON log lines.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional, TextIO

import yaml
from pydantic import BaseModel, Field, field_validator

from astro_schedule import paths
from astro_schedule.schedule.notifier import ConflictNotifier, ConsoleNotifier, LoggingNotifier

logger = logging.getLogger(__name__)

# ============================================================
# Logging
# ============================================================

LOG_LEVEL_ENV = "ASTRO_SCHEDULE_LOG_LEVEL"
"""Overrides log_level from schedule.yaml when set."""

DEFAULT_LOG_LEVEL = "WARNING"

LOG_JSON: bool = os.environ.get("ASTRO_SCHEDULE_LOG_JSON", "").lower() in ("1", "true", "yes")
"""Force JSON log lines even on a terminal."""

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ScheduleSettings(BaseModel):
    """Validated contents of schedule.yaml."""

    suggested_priorities: list[str] = Field(
        default_factory=lambda: ["High", "Medium", "Low"], min_length=1
    )
    notifiers: list[Literal["console", "log"]] = Field(default_factory=lambda: ["console"])
    log_level: str = Field(
        default_factory=lambda: os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        validate_default=True,
    )

    @field_validator("suggested_priorities")
    @classmethod
    def _non_blank(cls, v: list[str]) -> list[str]:
        cleaned = [p.strip() for p in v]
        if any(not p for p in cleaned):
            raise ValueError("suggested_priorities entries must be non-empty")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}")
        return level


def load_settings(path: Optional[str] = None) -> ScheduleSettings:
    """
    Load scheduler settings from YAML.

    With no path, the default location is used and a missing file means
    defaults. An explicit path must exist.

    Raises:
        FileNotFoundError if an explicit config file doesn't exist.
        yaml.YAMLError if config is invalid YAML.
        pydantic.ValidationError if values are invalid.
    """
    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Schedule config not found: {config_path}")
    else:
        config_path = paths.default_settings_path()
        if not config_path.exists():
            logger.debug(f"No schedule config at {config_path}; using defaults")
            return ScheduleSettings()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping at the top level")

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        data = {**data, "log_level": env_level}

    settings = ScheduleSettings(**data)
    logger.debug(f"Loaded schedule config from {config_path}")
    return settings


def build_notifiers(
    settings: ScheduleSettings, stream: TextIO | None = None
) -> list[ConflictNotifier]:
    """Instantiate the notifiers named in settings, in order."""
    built: list[ConflictNotifier] = []
    for name in settings.notifiers:
        if name == "console":
            built.append(ConsoleNotifier(stream))
        else:
            built.append(LoggingNotifier())
    return built
