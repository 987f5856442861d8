"""Hypothesis profile for property tests."""

from hypothesis import HealthCheck, settings

# The autouse singleton reset in tests/conftest.py runs once per test, not per
# example; property tests build their own registries so that is harmless.
settings.register_profile(
    "schedule", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("schedule")
