"""
Optional Pydantic Logfire tracing.

When LOGFIRE_ENABLED is true and LOGFIRE_TOKEN is set, ``initialize_logfire``
configures Logfire and instruments SQLAlchemy (database calls), HTTPX
(Graph API calls) and the FastAPI app. Each instrumentation can be switched
off with its LOGFIRE_TRACE_* flag.

``log_api_request`` and ``log_error`` do nothing until Logfire is ready and
never raise, so callers need no guards.
"""

import logging
import os
from typing import Any, Callable, Iterator, Optional, Tuple

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


LOGFIRE_ENABLED = _flag("LOGFIRE_ENABLED", "false")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "whatsms-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "1.0.0")

LOGFIRE_TRACE_SQLALCHEMY = _flag("LOGFIRE_TRACE_SQLALCHEMY", "true")
LOGFIRE_TRACE_HTTPX = _flag("LOGFIRE_TRACE_HTTPX", "true")
LOGFIRE_TRACE_FASTAPI = _flag("LOGFIRE_TRACE_FASTAPI", "true")

_logfire_ready = False


def _instrumentations(app: Optional[FastAPI]) -> Iterator[Tuple[str, bool, Callable[..., Any], dict]]:
    yield "SQLAlchemy", LOGFIRE_TRACE_SQLALCHEMY, logfire.instrument_sqlalchemy, {}
    yield "HTTPX", LOGFIRE_TRACE_HTTPX, logfire.instrument_httpx, {}
    if app is not None:
        yield "FastAPI", LOGFIRE_TRACE_FASTAPI, logfire.instrument_fastapi, {"app": app}


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Configure Logfire and its instrumentations.

    A failing instrumentation is logged and skipped; a failing ``configure``
    leaves Logfire off.

    Args:
        app: Application to instrument; without it FastAPI is not traced.

    Returns:
        Whether Logfire is now active.
    """
    global _logfire_ready

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled (LOGFIRE_ENABLED is not set)")
        return False
    if not LOGFIRE_TOKEN:
        logger.warning("LOGFIRE_ENABLED is set but LOGFIRE_TOKEN is empty; tracing stays off")
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )
    except Exception as e:
        logger.error(f"Logfire configuration failed: {e}", exc_info=True)
        return False

    for name, enabled, instrument, kwargs in _instrumentations(app):
        if not enabled:
            continue
        try:
            instrument(**kwargs)
        except Exception as e:
            logger.warning(f"Logfire: {name} instrumentation failed: {e}")
        else:
            logger.info(f"Logfire: {name} instrumentation enabled")

    _logfire_ready = True
    logger.info(f"Logfire ready: service={LOGFIRE_SERVICE_NAME} environment={LOGFIRE_ENVIRONMENT}")
    return True


def is_logfire_ready() -> bool:
    return _logfire_ready


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """Record a finished API request as a Logfire event."""
    if not _logfire_ready:
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Logfire rejected API request event: {method} {path}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """Record an error, with optional key/value context, as a Logfire event."""
    if not _logfire_ready:
        return
    try:
        logfire.error(f"{error_type}: {error_message}", **(context or {}))
    except Exception:
        logger.debug(f"Logfire rejected error event: {error_type}")
