from datetime import datetime

import pytest
from httpx import AsyncClient

from whatsms.server.core import constant

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == constant.API_VERSION
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


async def test_health_check_reports_process_time(client: AsyncClient):
    response = await client.get("http://localhost/api/health")
    assert float(response.headers["X-Process-Time"]) >= 0


async def test_cors_allows_local_dev_client(client: AsyncClient):
    response = await client.options(
        "/api/health",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
