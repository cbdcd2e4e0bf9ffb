"""
Runtime configuration.

Every setting is read from an environment variable of the same name as its
alias, or from a `.env` file in the working directory. Groups used together
(WhatsApp, CORS) are exposed as small models through properties.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constant

class WhatsAppConfig(BaseModel):
    """WhatsApp Business (Graph) API configuration."""

    access_token: Optional[str] = Field(
        default=None, alias="WHATSAPP_ACCESS_TOKEN", description="Graph API bearer token"
    )
    phone_number_id: Optional[str] = Field(
        default=None, alias="WHATSAPP_PHONE_NUMBER_ID", description="WhatsApp Business phone number identifier"
    )
    api_version: str = Field(
        default=constant.GRAPH_API_VERSION, alias="WHATSAPP_API_VERSION", description="Graph API version"
    )
    base_url: str = Field(
        default=constant.GRAPH_API_BASE_URL, alias="WHATSAPP_API_BASE_URL", description="Graph API base URL"
    )
    test_recipient: Optional[str] = Field(
        default=None,
        alias="WHATSAPP_TEST_RECIPIENT",
        description="Recipient phone number used by the WhatsApp diagnostic",
    )

    model_config = {"populate_by_name": True}

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token and self.phone_number_id)


class CORSConfig(BaseModel):
    """CORS configuration."""

    client_url: Optional[str] = Field(
        default=None, alias="CLIENT_URL", description="Front-end origin allowed in addition to local dev servers"
    )

    model_config = {"populate_by_name": True}

    @property
    def origins(self) -> list[str]:
        return [origin for origin in (self.client_url, *constant.DEV_CLIENT_ORIGINS) if origin]


class Settings(BaseSettings):
    """WhatsMS settings. Unknown variables are ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # Server
    server_host: str = Field(
        default="0.0.0.0",
        description="WhatsMS server host address to bind to",
        alias="WHATSMS_SERVER_HOST",
    )
    server_port: int = Field(
        default=3000,
        description="WhatsMS server port number",
        alias="WHATSMS_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="WHATSMS_LOG_LEVEL",
    )

    # Database
    database_url: Optional[str] = Field(
        default=None,
        description="Relational database connection URL (Prisma-style postgres URLs accepted)",
        alias="DATABASE_URL",
    )

    # WhatsApp
    whatsapp_access_token: Optional[str] = Field(default=None, alias="WHATSAPP_ACCESS_TOKEN")
    whatsapp_phone_number_id: Optional[str] = Field(default=None, alias="WHATSAPP_PHONE_NUMBER_ID")
    whatsapp_api_version: str = Field(default=constant.GRAPH_API_VERSION, alias="WHATSAPP_API_VERSION")
    whatsapp_api_base_url: str = Field(default=constant.GRAPH_API_BASE_URL, alias="WHATSAPP_API_BASE_URL")
    whatsapp_test_recipient: Optional[str] = Field(default=None, alias="WHATSAPP_TEST_RECIPIENT")

    # CORS
    client_url: Optional[str] = Field(default=None, alias="CLIENT_URL")

    @property
    def whatsapp(self) -> WhatsAppConfig:
        """Graph API credentials and endpoint."""
        return WhatsAppConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Allowed browser origins."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def effective_database_url(self) -> str:
        """Configured database URL, or the local SQLite file used for development."""
        return self.database_url or constant.LOCAL_DATABASE_URL


settings = Settings()
