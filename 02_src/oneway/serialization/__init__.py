"""Structured serialization of log entries."""

from .codec import (
    LOG_ENTRY_FIELDS,
    LogEntryPayload,
    decode,
    encode,
    from_dict,
    to_dict,
)

__all__ = [
    "LOG_ENTRY_FIELDS",
    "LogEntryPayload",
    "decode",
    "encode",
    "from_dict",
    "to_dict",
]
