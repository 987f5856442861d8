"""
Time utility for the daily schedule.

Times are 24-hour "HH:MM" strings with mandatory leading zeros. Internally
they are compared as minutes since midnight.
"""

import re

TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")

MINUTES_PER_DAY = 24 * 60


class InvalidTimeFormat(ValueError):
    """Raised when a time string is not a valid HH:MM value."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid time format: {text!r} (use HH:MM, 00:00-23:59)")


def is_valid_time(text: str) -> bool:
    """True if text is exactly a two-digit hour and two-digit minute."""
    return isinstance(text, str) and TIME_PATTERN.fullmatch(text) is not None


def to_minutes(text: str) -> int:
    """Convert an already-validated HH:MM string to minutes since midnight."""
    hour, minute = text.split(":")
    return int(hour) * 60 + int(minute)


def parse_time(text: str) -> int:
    """
    Validate and convert a HH:MM string.

    Returns:
        Minutes since midnight (0-1439)

    Raises:
        InvalidTimeFormat: missing leading zero, out-of-range hour/minute,
            or any extra characters.
    """
    if not is_valid_time(text):
        raise InvalidTimeFormat(text)
    return to_minutes(text)


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight back to HH:MM."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range for a single day: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
