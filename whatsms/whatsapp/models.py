"""
Graph API payload models.

Only the fields used by WhatsMS are declared; unknown fields in responses
are kept (``extra="allow"``) so they can be printed verbatim.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MediaType = Literal["image", "document", "video", "audio"]


class PhoneNumberInfo(BaseModel):
    """Response of ``GET /{phone-number-id}``."""

    model_config = ConfigDict(extra="allow")

    id: str
    verified_name: Optional[str] = None
    display_phone_number: Optional[str] = None
    quality_rating: Optional[str] = None


class MessageContact(BaseModel):
    model_config = ConfigDict(extra="allow")

    input: Optional[str] = None
    wa_id: Optional[str] = None


class MessageRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    message_status: Optional[str] = None


class SendMessageResponse(BaseModel):
    """Response of ``POST /{phone-number-id}/messages``."""

    model_config = ConfigDict(extra="allow")

    messaging_product: str = "whatsapp"
    contacts: List[MessageContact] = Field(default_factory=list)
    messages: List[MessageRef] = Field(default_factory=list)

    @property
    def message_id(self) -> Optional[str]:
        return self.messages[0].id if self.messages else None


class TemplateLanguage(BaseModel):
    code: str = "en_US"


class TemplatePayload(BaseModel):
    name: str
    language: TemplateLanguage = Field(default_factory=TemplateLanguage)
    components: List[Dict[str, Any]] = Field(default_factory=list)
