"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that the grouped configuration models work as expected.
"""

from pathlib import Path

import pytest

from whatsms.server.core import constant
from whatsms.server.core.config import CORSConfig, Settings, WhatsAppConfig


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


@pytest.fixture(autouse=True)
def _clean_server_env(monkeypatch):
    for name in (
        "WHATSMS_SERVER_HOST",
        "WHATSMS_SERVER_PORT",
        "WHATSMS_LOG_LEVEL",
        "WHATSAPP_API_VERSION",
        "WHATSAPP_API_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_lists_every_setting(self, env_example_vars: dict[str, str]):
        aliases = {field.alias for field in Settings.model_fields.values()}
        assert aliases <= set(env_example_vars)

    def test_server_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("WHATSMS_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("WHATSMS_SERVER_PORT", env_example_vars["WHATSMS_SERVER_PORT"])
        monkeypatch.setenv("WHATSMS_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)
        assert settings.server_host == "127.0.0.1"
        assert settings.server_port == int(env_example_vars["WHATSMS_SERVER_PORT"])
        assert settings.log_level.upper() == "DEBUG"

    def test_database_url_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("DATABASE_URL", env_example_vars["DATABASE_URL"])

        settings = Settings(_env_file=None)
        assert settings.database_url == env_example_vars["DATABASE_URL"]
        assert settings.effective_database_url == env_example_vars["DATABASE_URL"]


class TestWhatsAppConfigBinding:
    def test_whatsapp_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "EAAG-token")
        monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "1234567890")
        monkeypatch.setenv("WHATSAPP_API_VERSION", "v22.0")
        monkeypatch.setenv("WHATSAPP_TEST_RECIPIENT", "+55 11 99999-0000")

        whatsapp_config = Settings(_env_file=None).whatsapp

        assert isinstance(whatsapp_config, WhatsAppConfig)
        assert whatsapp_config.access_token == "EAAG-token"
        assert whatsapp_config.phone_number_id == "1234567890"
        assert whatsapp_config.api_version == "v22.0"
        assert whatsapp_config.base_url == constant.GRAPH_API_BASE_URL
        assert whatsapp_config.test_recipient == "+55 11 99999-0000"
        assert whatsapp_config.has_credentials is True

    def test_whatsapp_config_model_validate(self):
        whatsapp_config = WhatsAppConfig.model_validate({"WHATSAPP_ACCESS_TOKEN": "EAAG-token"})

        assert whatsapp_config.access_token == "EAAG-token"
        assert whatsapp_config.has_credentials is False


class TestCORSConfigBinding:
    def test_cors_defaults_to_local_dev_servers(self):
        cors_config = Settings(_env_file=None).cors

        assert isinstance(cors_config, CORSConfig)
        assert cors_config.origins == list(constant.DEV_CLIENT_ORIGINS)

    def test_client_url_is_allowed_first(self, monkeypatch):
        monkeypatch.setenv("CLIENT_URL", "https://crm.example.com")

        cors_config = Settings(_env_file=None).cors

        assert cors_config.origins == ["https://crm.example.com", *constant.DEV_CLIENT_ORIGINS]


class TestSettingsDefaults:
    def test_server_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 3000
        assert settings.log_level == "INFO"

    def test_database_falls_back_to_local_sqlite(self):
        settings = Settings(_env_file=None)

        assert settings.database_url is None
        assert settings.effective_database_url == constant.LOCAL_DATABASE_URL

    def test_whatsapp_defaults(self):
        whatsapp_config = Settings(_env_file=None).whatsapp

        assert whatsapp_config.api_version == "v21.0"
        assert whatsapp_config.access_token is None
        assert whatsapp_config.has_credentials is False
