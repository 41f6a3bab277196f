"""JSON codec for LogEntry payloads."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import LogEntryDecodeError, LogEntryEncodeError
from ..logging_config import get_logger
from ..models import LogEntry, LogLevel

logger = get_logger(__name__)


# Fields of LogEntry that travel on the wire
LOG_ENTRY_FIELDS = ("level", "message", "timestamp")


class LogEntryPayload(BaseModel):
    """Wire schema for a LogEntry."""

    model_config = ConfigDict(extra="ignore")

    level: LogLevel
    message: str
    timestamp: datetime


def _to_payload(entry: LogEntry) -> LogEntryPayload:
    try:
        return LogEntryPayload.model_validate(entry, from_attributes=True)
    except ValidationError as e:
        logger.warning(
            "Cannot encode log entry",
            extra={"context": {"errors": e.errors(include_url=False, include_input=False)}},
        )
        raise LogEntryEncodeError(f"Cannot encode log entry: {e}") from e


def _from_payload(payload: LogEntryPayload) -> LogEntry:
    return LogEntry(
        level=payload.level,
        message=payload.message,
        timestamp=payload.timestamp,
    )


def to_dict(entry: LogEntry) -> dict[str, Any]:
    """Convert entry to a JSON-compatible dict with the wire field names."""
    return _to_payload(entry).model_dump(mode="json", include=set(LOG_ENTRY_FIELDS))


def from_dict(data: Any) -> LogEntry:
    """Build a LogEntry from a decoded mapping."""
    try:
        payload = LogEntryPayload.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Rejected log entry payload",
            extra={"context": {"errors": e.errors(include_url=False, include_input=False)}},
        )
        raise LogEntryDecodeError(f"Invalid log entry payload: {e}") from e
    return _from_payload(payload)


def encode(entry: LogEntry) -> str:
    """Serialize entry to JSON text."""
    payload = _to_payload(entry)
    try:
        return payload.model_dump_json(include=set(LOG_ENTRY_FIELDS))
    except PydanticSerializationError as e:
        # e.g. lone surrogates in message cannot be written as UTF-8
        logger.warning("Cannot serialize log entry to JSON: %s", e)
        raise LogEntryEncodeError(f"Cannot serialize log entry to JSON: {e}") from e


def decode(data: str | bytes) -> LogEntry:
    """Parse JSON text produced by encode() back into a LogEntry."""
    try:
        payload = LogEntryPayload.model_validate_json(data)
    except ValidationError as e:
        logger.warning(
            "Rejected log entry JSON",
            extra={"context": {"errors": e.errors(include_url=False, include_input=False)}},
        )
        raise LogEntryDecodeError(f"Invalid log entry JSON: {e}") from e
    return _from_payload(payload)
