"""
Test fixtures for deterministic testing.

This module provides:
- RecordingNotifier: captures conflict messages, optionally into a shared log
"""

from .recording import RecordingNotifier

__all__ = ["RecordingNotifier"]
