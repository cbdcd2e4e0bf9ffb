"""Server-wide constants."""

PROJECT_NAME = "WhatsMS"
API_VERSION = "1.0.0"
API_PREFIX = "/api"

LOCAL_DATABASE_URL = "sqlite+aiosqlite:///./whatsms.db"

GRAPH_API_BASE_URL = "https://graph.facebook.com"
GRAPH_API_VERSION = "v21.0"

DEV_CLIENT_ORIGINS = ("http://localhost:5173", "http://localhost:5174")

# SystemConfig keys holding the WhatsApp credentials
ACCESS_TOKEN_KEY = "accessToken"
PHONE_NUMBER_ID_KEY = "phoneNumberId"
