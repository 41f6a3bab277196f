"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
ENV_FILE = PROJECT_ROOT / ".env"


PathLike = Union[str, Path]


@dataclass
class LoggingSettings:
    """Logging options read from the environment."""

    level: str = "INFO"
    file: Path = DEFAULT_LOG_PATH
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    console: bool = True


def load_environment(env_file: PathLike | None = None) -> bool:
    """Load variables from a .env file without overriding the process env."""
    path = Path(env_file) if env_file is not None else ENV_FILE
    return load_dotenv(path, override=False)


def resolve_log_path(env_value: PathLike | None = None) -> Path:
    """Resolve LOG_FILE to an absolute path."""
    if not env_value:
        return DEFAULT_LOG_PATH

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def load_logging_settings(env_file: PathLike | None = None) -> LoggingSettings:
    """
    Build LoggingSettings from .env and the process environment.

    Reads LOG_LEVEL, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT and
    LOG_CONSOLE ("0"/"false" disables the stdout handler).
    """
    load_environment(env_file)
    defaults = LoggingSettings()
    return LoggingSettings(
        level=os.getenv("LOG_LEVEL", defaults.level).upper(),
        file=resolve_log_path(os.getenv("LOG_FILE")),
        max_bytes=int(os.getenv("LOG_MAX_BYTES", defaults.max_bytes)),
        backup_count=int(os.getenv("LOG_BACKUP_COUNT", defaults.backup_count)),
        console=os.getenv("LOG_CONSOLE", "1").lower() not in ("0", "false", "no"),
    )
