"""Shared fixtures"""

import io
from datetime import datetime

import pytest

import tinylog
from tinylog import LoggerConfig, TimestampProvider

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5)
FIXED_TIMESTAMP = "2024-01-02 03:04:05"


@pytest.fixture
def fixed_clock():
    """Timestamp provider frozen at FIXED_TIME."""
    return TimestampProvider(clock=lambda: FIXED_TIME)


@pytest.fixture(autouse=True)
def clean_state(fixed_clock):
    """Start and finish every test with no loggers and no outputs."""
    tinylog.reset(LoggerConfig(debug_mode=True))
    tinylog.configure(LoggerConfig(debug_mode=True), timestamp_provider=fixed_clock)
    yield
    tinylog.reset()


@pytest.fixture
def stream():
    return io.StringIO()
