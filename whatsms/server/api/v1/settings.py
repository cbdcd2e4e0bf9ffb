"""
API endpoints for system settings.

System settings are key/value pairs stored in the database, among them the
WhatsApp credentials used by the messaging features. The endpoints read and
upsert them, and verify the stored credentials against the Graph API.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from whatsms import whatsapp
from whatsms.core.database import get_session
from whatsms.core.database.repositories import SystemConfigRepository
from whatsms.core.logging_config import get_logger
from whatsms.server.core import constant
from whatsms.server.core.config import settings

logger = get_logger(__name__)

router = APIRouter()


class SettingsSaved(BaseModel):
    success: bool = True
    message: str = "Settings saved successfully"


class ConnectionTestResult(BaseModel):
    message: str
    verifiedName: str | None = None


@router.get(
    "",
    response_model=Dict[str, str],
    summary="Get System Settings",
    description="Retrieve every system setting as a key/value map.",
)
async def get_settings(session: AsyncSession = Depends(get_session)) -> Dict[str, str]:
    """Return all system settings as ``{key: value}``."""
    try:
        return await SystemConfigRepository(session).get_map()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching settings: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch settings",
        ) from e


@router.post(
    "",
    response_model=SettingsSaved,
    summary="Save System Settings",
    description="Insert or update several settings at once. Values are stored as strings.",
)
async def save_settings(
    values: Dict[str, Any] = Body(..., examples=[{"accessToken": "EAAG...", "phoneNumberId": "1234567890"}]),
    session: AsyncSession = Depends(get_session),
) -> SettingsSaved:
    """
    Upsert system settings.

    All entries are written in a single transaction; new keys get the
    description ``Config for <key>``.
    """
    try:
        await SystemConfigRepository(session).upsert_many(values)
    except SQLAlchemyError as e:
        logger.error(f"Error saving settings: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save settings",
        ) from e
    return SettingsSaved()


@router.post(
    "/test",
    response_model=ConnectionTestResult,
    summary="Test WhatsApp Connection",
    description="Verify the stored WhatsApp credentials by reading the business phone number from the Graph API.",
    responses={
        400: {"description": "Credentials incomplete"},
        502: {"description": "Graph API rejected the credentials"},
    },
)
async def test_connection(session: AsyncSession = Depends(get_session)) -> ConnectionTestResult:
    """Check that the stored access token can read the stored phone number id."""
    try:
        stored = await SystemConfigRepository(session).get_values(
            [constant.ACCESS_TOKEN_KEY, constant.PHONE_NUMBER_ID_KEY]
        )
    except SQLAlchemyError as e:
        logger.error(f"Error loading WhatsApp credentials: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch settings",
        ) from e

    token = stored.get(constant.ACCESS_TOKEN_KEY)
    phone_number_id = stored.get(constant.PHONE_NUMBER_ID_KEY)
    if not token or not phone_number_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Credentials incomplete")

    try:
        async with whatsapp.build_client(
            settings.whatsapp, access_token=token, phone_number_id=phone_number_id
        ) as client:
            info = await client.get_phone_number()
    except whatsapp.WhatsAppApiError as e:
        logger.warning(f"WhatsApp connection test failed: {e} (status={e.status_code})")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Connection test failed: {e}",
        ) from e
    except ValidationError as e:
        logger.warning(f"WhatsApp connection test got an unexpected response: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Connection test failed: unexpected Graph API response",
        ) from e

    return ConnectionTestResult(message="Configuration Validated Successfully", verifiedName=info.verified_name)
