"""
Request timing middleware.

Every request handled by the API is timed. The duration is sent to Logfire
through ``log_api_request`` (a no-op while Logfire is off), returned to the
caller in ``X-Process-Time`` and logged as a warning above ``SLOW_REQUEST_MS``.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from whatsms.core.logging_config import get_logger
from whatsms.core.monitoring import log_api_request

logger = get_logger(__name__)

SLOW_REQUEST_MS = 1000
PROCESS_TIME_HEADER = "X-Process-Time"


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


class LogfireMiddleware(BaseHTTPMiddleware):
    """Times requests and reports them to the log and to Logfire."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        request.state.start_time = started
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = _elapsed_ms(started)
            logger.error(
                f"{route} raised {type(e).__name__} after {elapsed:.2f}ms",
                exc_info=True,
                extra={"method": request.method, "path": request.url.path, "duration_ms": elapsed},
            )
            log_api_request(method=request.method, path=request.url.path, status_code=500, duration_ms=elapsed)
            raise

        elapsed = _elapsed_ms(started)
        log_api_request(
            method=request.method, path=request.url.path, status_code=response.status_code, duration_ms=elapsed
        )
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.3f}"

        if elapsed > SLOW_REQUEST_MS:
            logger.warning(
                f"Slow API request: {route} -> {response.status_code} in {elapsed:.2f}ms",
                extra={"method": request.method, "path": request.url.path, "duration_ms": elapsed},
            )
        else:
            logger.debug(f"{route} -> {response.status_code} in {elapsed:.2f}ms")

        return response
