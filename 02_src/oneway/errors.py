"""Exceptions raised by oneway."""


class LogEntryDecodeError(ValueError):
    """Structured input could not be decoded into a LogEntry."""


class LogEntryEncodeError(ValueError):
    """A LogEntry holds values that cannot be encoded."""
