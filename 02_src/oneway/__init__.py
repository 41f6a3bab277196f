"""oneway: log entry payloads for one-way messaging tests."""

from .clock import Clock, FixedClock, system_clock
from .errors import LogEntryDecodeError, LogEntryEncodeError
from .logging_config import get_logger, setup_logging
from .models import LogEntry, LogLevel
from .serialization import decode, encode, from_dict, to_dict

__all__ = [
    # Models
    "LogEntry",
    "LogLevel",
    # Clock
    "Clock",
    "FixedClock",
    "system_clock",
    # Serialization
    "encode",
    "decode",
    "to_dict",
    "from_dict",
    # Logging
    "setup_logging",
    "get_logger",
    # Errors
    "LogEntryDecodeError",
    "LogEntryEncodeError",
]
