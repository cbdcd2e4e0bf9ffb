"""
WhatsMS API server.

Builds the FastAPI application: CORS for the CRM front end, request timing,
the fallback exception handler, optional Logfire tracing and the routers
below ``/api``. Run it with ``whatsms-server`` or ``python -m whatsms.server.main``.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from whatsms.core.database import init_db
from whatsms.core.logging_config import get_logger, setup_logging
from whatsms.core.monitoring import initialize_logfire

from .api.v1 import health, notes
from .api.v1 import settings as settings_api
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the local database on startup.

    A database that cannot be prepared is logged; the server still starts and
    the endpoints report their own database errors.
    """
    logger.info(f"{constant.PROJECT_NAME} {constant.API_VERSION} starting")
    try:
        await init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
    else:
        logger.info("Database ready")

    yield

    logger.info(f"{constant.PROJECT_NAME} stopped")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="Contact notes and system settings of the WhatsMS CRM.",
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, prefix=constant.API_PREFIX, tags=["health"])
app.include_router(notes.router, prefix=f"{constant.API_PREFIX}/notes", tags=["notes"])
app.include_router(settings_api.router, prefix=f"{constant.API_PREFIX}/settings", tags=["settings"])


def run() -> None:
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
