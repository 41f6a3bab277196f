"""Clock helpers for stamping log entries."""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


class FixedClock:
    """Clock that always returns the same instant until advanced."""

    def __init__(self, instant: datetime | None = None):
        self._instant = instant or system_clock()

    def __call__(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by delta and return the new instant."""
        self._instant = self._instant + delta
        return self._instant
