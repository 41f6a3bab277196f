"""Log entry payload model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..clock import Clock, system_clock


class LogLevel(str, Enum):
    """Severity of a log entry."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def default(cls) -> "LogLevel":
        """Zero-value of the enum (first declared member)."""
        return next(iter(cls))


@dataclass
class LogEntry:
    """
    A log entry carried as the payload of a one-way message.

    Fields are plain attributes and may be reassigned at any time; there is
    no cross-field validation and ``timestamp`` is never refreshed after
    construction. Instances are not synchronized: callers sharing one entry
    between threads must guard mutation themselves.

    Producers should use ``create_default()`` or ``create()``. The raw
    constructor exists for decoders that restore a stored timestamp.
    """

    level: LogLevel = field(default_factory=LogLevel.default)
    message: str = ""
    timestamp: datetime = field(default_factory=system_clock)

    @classmethod
    def create_default(cls, clock: Clock = system_clock) -> "LogEntry":
        """Create an entry with default level and empty message, stamped now."""
        return cls(level=LogLevel.default(), message="", timestamp=clock())

    @classmethod
    def create(
        cls, level: LogLevel, message: str, clock: Clock = system_clock
    ) -> "LogEntry":
        """Create an entry with the given level and message, stamped now."""
        return cls(level=level, message=message, timestamp=clock())
