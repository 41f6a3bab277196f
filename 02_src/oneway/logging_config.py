"""Structured logging configuration for oneway."""

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path

from .config import LoggingSettings, load_logging_settings, resolve_log_path


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        # Structured fields passed via extra={"context": {...}}
        context = getattr(record, "context", None)
        if context is not None:
            log_data["context"] = context

        return json.dumps(log_data, default=str, ensure_ascii=False)


def build_logging_config(settings: LoggingSettings) -> dict:
    """Translate LoggingSettings into a logging.config.dictConfig mapping."""
    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(settings.file),
            "maxBytes": settings.max_bytes,
            "backupCount": settings.backup_count,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if settings.console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"()": JSONFormatter}},
        "handlers": handlers,
        "root": {"level": settings.level.upper(), "handlers": list(handlers)},
    }


def setup_logging(
    log_level: str | None = None,
    log_file: str | Path | None = None,
    settings: LoggingSettings | None = None,
) -> LoggingSettings:
    """
    Configure root logging for processes that send or receive log entries.

    Args:
        log_level: Overrides LOG_LEVEL.
        log_file: Overrides LOG_FILE.
        settings: Use these instead of reading the environment.

    Returns:
        The settings that were applied.
    """
    if settings is None:
        settings = load_logging_settings()
    if log_level is not None:
        settings.level = log_level.upper()
    if log_file is not None:
        settings.file = resolve_log_path(log_file)

    settings.file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings))
    return settings


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)
