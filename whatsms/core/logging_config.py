"""
Logging setup shared by the API server and the diagnostic commands.

``setup_logging`` installs one console handler on the root logger (plus an
optional ``logs/whatsms.log`` file handler) and applies per-package levels
from ``MODULE_LOG_LEVELS``. Nothing is configured at import time.

Environment:
- WHATSMS_LOG_LEVEL: console level (read through the server settings)
- LOG_FORMAT: ``simple``, ``detailed`` (default) or ``json``
- ENABLE_FILE_LOGGING / LOG_FILE_DIR: opt-in file output
"""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "whatsms.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


def _default_level() -> str:
    # Settings may fail to load, e.g. on a malformed .env
    try:
        from whatsms.server.core.config import settings

        return settings.log_level.upper()
    except Exception:
        return os.getenv("WHATSMS_LOG_LEVEL", "INFO").upper()


LOG_LEVEL = _default_level()
LOG_FORMAT = os.getenv("LOG_FORMAT", "detailed")
LOG_FILE_DIR = os.getenv("LOG_FILE_DIR", "logs")
ENABLE_FILE_LOGGING = _env_flag("ENABLE_FILE_LOGGING")

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"line": %(lineno)d, "message": "%(message)s"}'
)

_FORMATS = {"simple": SIMPLE_FORMAT, "detailed": DETAILED_FORMAT, "json": JSON_FORMAT}

MODULE_LOG_LEVELS = {
    "whatsms": "INFO",
    "whatsms.server": "INFO",
    "whatsms.server.api": "DEBUG",
    "whatsms.core.database": "INFO",
    "whatsms.whatsapp": "DEBUG",
    "whatsms.diagnostics": "INFO",
    # Third-party
    "sqlalchemy": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def _build_file_handler(formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(LOG_FILE_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    (Re)configure the root logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Console level; defaults to WHATSMS_LOG_LEVEL
        log_format: ``simple``, ``detailed`` or ``json``; unknown names fall back to detailed
        enable_file: Allow the file handler; it is only added when ENABLE_FILE_LOGGING is also set
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT
    formatter = logging.Formatter(_FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    # Handlers filter; the root lets everything through
    root_logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    to_file = enable_file and ENABLE_FILE_LOGGING
    if to_file:
        root_logger.addHandler(_build_file_handler(formatter))

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root_logger.debug("Logging configured: level=%s format=%s file=%s", level, fmt, to_file)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
