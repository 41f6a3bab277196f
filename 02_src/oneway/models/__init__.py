"""Data models for oneway."""

from .log_entry import LogEntry, LogLevel

__all__ = [
    "LogEntry",
    "LogLevel",
]
