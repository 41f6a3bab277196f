"""Pytest configuration and fixtures."""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def fixed_clock():
    """Create a clock frozen at a known instant."""
    from oneway.clock import FixedClock

    return FixedClock(datetime(2026, 10, 18, 9, 30, 15, 123456, tzinfo=timezone.utc))


@pytest.fixture
def sample_entry(fixed_clock):
    """Create an ERROR entry stamped by the fixed clock."""
    from oneway.models import LogEntry, LogLevel

    return LogEntry.create(LogLevel.ERROR, "disk full", clock=fixed_clock)


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
