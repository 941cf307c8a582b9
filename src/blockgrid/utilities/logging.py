import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from blockgrid.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "BLOCKGRID_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "BLOCKGRID_LOG_TO_FILE"
DEFAULT_LOG_SUBDIR = Path(".blockgrid") / "logs"
MAX_LOG_BYTES = 1024 * 1024  # 1 MiB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path:
    """Return the directory for rotating log files, creating it if needed."""

    configured = os.getenv(LOG_DIR_ENV_VAR)
    path = Path(configured).expanduser() if configured else Path.home() / DEFAULT_LOG_SUBDIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def _log_filename(name: str) -> str:
    stem = name.replace(os.sep, "_").replace("/", "_").replace(".", "_")
    return f"{stem or 'root'}.log"


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    # stdout is reserved for the emitted layout record.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if _env_flag(LOG_TO_FILE_ENV_VAR, default=True):
        handlers.append(
            RotatingFileHandler(
                _resolve_log_directory() / _log_filename(logger.name),
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and, unless disabled, a rolling file."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger
