from __future__ import annotations

import httpx
import pytest

# Keep every test away from a developer's real credentials and database
_ISOLATED_ENV = (
    "DATABASE_URL",
    "WHATSAPP_ACCESS_TOKEN",
    "WHATSAPP_PHONE_NUMBER_ID",
    "WHATSAPP_TEST_RECIPIENT",
    "CLIENT_URL",
)

# Mock hosts, loopback and the relative URLs ASGITransport produces
_LOCAL_URL_PREFIXES = (
    "http://mock",
    "https://mock",
    "http://localhost",
    "http://127.0.0.1",
    "/",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _no_external_http(monkeypatch: pytest.MonkeyPatch):
    """Fail any test that would reach a real host such as graph.facebook.com."""
    send_sync = httpx.Client.request
    send_async = httpx.AsyncClient.request

    def _check(url) -> None:
        target = str(url)
        if not target.startswith(_LOCAL_URL_PREFIXES):
            raise RuntimeError(f"Outbound HTTP is disabled in tests: {target}")

    def guarded_sync(self, method, url, *args, **kwargs):
        _check(url)
        return send_sync(self, method, url, *args, **kwargs)

    async def guarded_async(self, method, url, *args, **kwargs):
        _check(url)
        return await send_async(self, method, url, *args, **kwargs)

    monkeypatch.setattr(httpx.Client, "request", guarded_sync)
    monkeypatch.setattr(httpx.AsyncClient, "request", guarded_async)
