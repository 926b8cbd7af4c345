"""Hypothesis profiles and pytest fixtures for refcheck.

Reference generators live in strategies.py so test modules can import them.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from hypothesis import HealthCheck, settings

from refcheck.core.types import Clock, fixed_clock

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

AS_OF = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


@pytest.fixture
def clock() -> Clock:
    """A fixed clock well after every embedded date used in the tests."""
    return fixed_clock(AS_OF)
