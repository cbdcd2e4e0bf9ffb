"""
Fallback handler for exceptions no endpoint handled.

Endpoints translate expected failures (database errors, Graph API errors)
into ``HTTPException`` themselves. Anything else reaches this handler, which
logs it with the request context under a short error id and returns that id
to the client so a report can be matched with the log line.
"""

import traceback
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from whatsms.core.logging_config import get_logger
from whatsms.core.monitoring import log_error

logger = get_logger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
    }


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer with a 500 carrying its error id."""
    error_id = uuid.uuid4().hex[:12]
    error_type = type(exc).__name__
    context = _request_context(request)

    logger.error(
        f"Unhandled exception [{error_id}] in {context['method']} {context['path']}: {exc}",
        exc_info=exc,
        extra={
            **context,
            "error_id": error_id,
            "error_type": error_type,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(error_type, str(exc), {"error_id": error_id, "method": context["method"], "path": context["path"]})

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_id": error_id, "error_type": error_type},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the fallback handler on ``app``."""
    app.add_exception_handler(Exception, global_exception_handler)
