"""Liveness check for load balancers and the CRM front end."""

from datetime import datetime, timezone

from fastapi import APIRouter

from whatsms.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report that the server is up, with the server time and API version.",
    response_description="Status, timestamp and version.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a status indicator, the server time and the API version.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": constant.API_VERSION,
    }
