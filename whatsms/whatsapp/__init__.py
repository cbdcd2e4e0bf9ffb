"""
WhatsApp Business Cloud (Graph) API access.

Provides an async httpx client for the handful of Graph endpoints WhatsMS
uses, its payload models and typed errors.
"""

from typing import Optional

from whatsms.server.core.config import WhatsAppConfig

from .client import WhatsAppClient, mask_token, normalize_phone
from .errors import WhatsAppApiError, WhatsAppCredentialsError, WhatsMSError
from .models import PhoneNumberInfo, SendMessageResponse


def build_client(
    config: WhatsAppConfig,
    *,
    access_token: Optional[str] = None,
    phone_number_id: Optional[str] = None,
) -> WhatsAppClient:
    """Create a client from configuration, explicit credentials taking precedence."""
    return WhatsAppClient(
        access_token or config.access_token,
        phone_number_id or config.phone_number_id,
        api_version=config.api_version,
        base_url=config.base_url,
    )


__all__ = [
    "PhoneNumberInfo",
    "SendMessageResponse",
    "WhatsAppApiError",
    "WhatsAppClient",
    "WhatsAppCredentialsError",
    "WhatsMSError",
    "build_client",
    "mask_token",
    "normalize_phone",
]
