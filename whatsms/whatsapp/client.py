from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

import httpx

from whatsms.server.core import constant

from .errors import WhatsAppApiError, WhatsAppCredentialsError
from .models import MediaType, PhoneNumberInfo, SendMessageResponse, TemplateLanguage, TemplatePayload

_PHONE_NOISE = re.compile(r"[\s+\-]")


def normalize_phone(phone: str) -> str:
    """Strip spaces, ``+`` and ``-`` from a phone number (Graph expects digits only)."""
    return _PHONE_NOISE.sub("", phone)


def mask_token(token: Optional[str], visible: int = 10) -> str:
    """Show only the first characters of an access token."""
    if not token:
        return "MISSING"
    return f"{token[:visible]}..."


class WhatsAppClient:
    """
    Thin async HTTP client for the WhatsApp Business Cloud (Graph) API.

    Responsibilities:
    - get_phone_number: verify the phone number id and token
    - send_template_message / send_text_message / send_media_message
    - mark_as_read

    Each call is a single request; there is no retry.
    """

    def __init__(
        self,
        access_token: Optional[str],
        phone_number_id: Optional[str],
        *,
        api_version: str = constant.GRAPH_API_VERSION,
        base_url: str = constant.GRAPH_API_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not access_token or not phone_number_id:
            raise WhatsAppCredentialsError("WhatsApp access token and phone number id are required")
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.base_url = f"{base_url.rstrip('/')}/{api_version}"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "WhatsAppClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/{self.phone_number_id}/messages"

    async def _request(self, method: str, url: str, *, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self._logger.debug("WhatsAppClient: %s %s", method, url)
        try:
            r = await self._client.request(method, url, headers=self._headers(), json=json)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            details = _response_body(e.response)
            raise WhatsAppApiError(
                _graph_error_message(details) or f"Graph API request failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=details,
            ) from e
        except httpx.HTTPError as e:
            raise WhatsAppApiError(f"Graph API request failed: {e}") from e
        data = _response_body(r)
        if not isinstance(data, dict):
            raise WhatsAppApiError("Unexpected response shape from Graph API", status_code=r.status_code, details=data)
        return data

    async def get_phone_number(self) -> PhoneNumberInfo:
        """Fetch the business phone number, proving the token can access it."""
        data = await self._request("GET", f"{self.base_url}/{self.phone_number_id}")
        info = PhoneNumberInfo.model_validate(data)
        self._logger.debug("WhatsAppClient.get_phone_number: verified_name=%s", info.verified_name)
        return info

    async def send_template_message(
        self,
        phone: str,
        template_name: str,
        language_code: str = "en_US",
        components: Optional[List[Dict[str, Any]]] = None,
    ) -> SendMessageResponse:
        """Send an approved message template."""
        template = TemplatePayload(
            name=template_name,
            language=TemplateLanguage(code=language_code),
            components=components or [],
        )
        body = {
            "messaging_product": "whatsapp",
            "to": normalize_phone(phone),
            "type": "template",
            "template": template.model_dump(exclude=None if components else {"components"}),
        }
        data = await self._request("POST", self.messages_url, json=body)
        return SendMessageResponse.model_validate(data)

    async def send_text_message(self, phone: str, message: str) -> SendMessageResponse:
        body = {
            "messaging_product": "whatsapp",
            "to": normalize_phone(phone),
            "type": "text",
            "text": {"body": message},
        }
        data = await self._request("POST", self.messages_url, json=body)
        return SendMessageResponse.model_validate(data)

    async def send_media_message(
        self,
        phone: str,
        media_url: str,
        media_type: MediaType = "image",
        caption: str = "",
    ) -> SendMessageResponse:
        """Send media by public link. Captions only apply to images and videos."""
        media: Dict[str, str] = {"link": media_url}
        if caption and media_type in ("image", "video"):
            media["caption"] = caption
        body = {
            "messaging_product": "whatsapp",
            "to": normalize_phone(phone),
            "type": media_type,
            media_type: media,
        }
        data = await self._request("POST", self.messages_url, json=body)
        return SendMessageResponse.model_validate(data)

    async def mark_as_read(self, message_id: str) -> Dict[str, Any]:
        body = {
            "messaging_product": "whatsapp",
            "status": "read",
            "message_id": message_id,
        }
        return await self._request("POST", self.messages_url, json=body)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _graph_error_message(details: Any) -> Optional[str]:
    # Graph errors look like {"error": {"message": ..., "type": ..., "code": ...}}
    if isinstance(details, dict) and isinstance(details.get("error"), dict):
        message = details["error"].get("message")
        return str(message) if message else None
    return None
