"""
Unit tests for server exception handlers.

Tests cover global exception handling with various error types
and the registration of the handler on an application.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from whatsms.server.exception_handlers import setup_exception_handlers
from whatsms.server.exception_handlers.global_handler import (
    global_exception_handler,
)


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.fixture
    def mock_request(self):
        """Create a mock request object."""
        request = Mock(spec=Request)
        request.method = "POST"
        request.url.path = "/api/notes"
        request.query_params = {}
        request.client = Mock()
        request.client.host = "127.0.0.1"
        return request

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("whatsms.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["path"] == "/api/notes"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_json_500(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("whatsms.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert len(body["error_id"]) == 12

    @pytest.mark.asyncio
    async def test_exception_handler_forwards_to_monitoring(self, mock_request):
        exc = KeyError("accessToken")

        with patch("whatsms.server.exception_handlers.global_handler.logger"), patch(
            "whatsms.server.exception_handlers.global_handler.log_error"
        ) as mock_log_error:
            await global_exception_handler(mock_request, exc)

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][0] == "KeyError"
        context = mock_log_error.call_args[0][2]
        assert (context["method"], context["path"]) == ("POST", "/api/notes")
        assert "error_id" in context

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch("whatsms.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("no client"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestSetupExceptionHandlers:
    def test_registers_handler_for_all_exceptions(self):
        app = FastAPI()

        setup_exception_handlers(app)

        assert app.exception_handlers[Exception] is global_exception_handler

    @pytest.mark.asyncio
    async def test_unhandled_error_becomes_500(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error_type"] == "RuntimeError"
