"""
Unit tests for server exception handlers.

Tests cover the error envelope produced for application errors, framework
HTTP errors, validation failures and unhandled exceptions.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel, Field
from slowapi.errors import RateLimitExceeded

from scavenger_hunt_ai.core.errors import ConflictError, NotFoundError, SafetyViolationError
from scavenger_hunt_ai.server.exception_handlers import setup_exception_handlers
from scavenger_hunt_ai.server.exception_handlers.global_handler import (
    app_error_handler,
    error_response,
    global_exception_handler,
    rate_limit_exceeded_handler,
)

HANDLER_MODULE = "scavenger_hunt_ai.server.exception_handlers.global_handler"


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/v1/test"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


def _body(response: JSONResponse) -> dict:
    return json.loads(response.body.decode())


class TestErrorResponse:
    def test_envelope_fields(self):
        response = error_response(404, "NOT_FOUND", "Hunt h1 not found")

        body = _body(response)
        assert response.status_code == 404
        assert set(body) == {"code", "message", "details", "timestamp"}
        assert body["code"] == "NOT_FOUND"
        assert body["details"] is None

    def test_rate_limit_handler(self, mock_request):
        exc = Mock(spec=RateLimitExceeded)
        exc.detail = "100 per 15 minute"

        with patch(f"{HANDLER_MODULE}.logger") as mock_logger:
            response = rate_limit_exceeded_handler(mock_request, exc)

        assert response.status_code == 429
        body = _body(response)
        assert body["code"] == "RATE_LIMITED"
        assert body["details"] == {"limit": "100 per 15 minute"}
        assert "127.0.0.1" in mock_logger.warning.call_args[0][0]


@pytest.mark.asyncio
class TestHandlersDirectly:
    async def test_app_error_handler(self, mock_request):
        response = await app_error_handler(mock_request, ConflictError("Hunt is GENERATING", details={"x": 1}))

        assert response.status_code == 409
        body = _body(response)
        assert body["code"] == "CONFLICT"
        assert body["message"] == "Hunt is GENERATING"
        assert body["details"] == {"x": 1}

    async def test_safety_violation_details(self, mock_request):
        response = await app_error_handler(mock_request, SafetyViolationError(["knife"]))

        body = _body(response)
        assert response.status_code == 500
        assert body["code"] == "SAFETY_VIOLATION"
        assert body["details"] == {"concerns": ["knife"]}

    async def test_global_handler_logs_error(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, ValueError("Test error"))

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["client"] == "127.0.0.1"

    async def test_global_handler_response(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger"):
            response = await global_exception_handler(mock_request, RuntimeError("Test error"))

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = _body(response)
        assert body["code"] == "INTERNAL_SERVER_ERROR"
        assert body["message"] == "Internal server error"
        assert body["details"]["error_type"] == "RuntimeError"
        assert len(body["details"]["error_id"]) == 12

    async def test_global_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch(f"{HANDLER_MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("Test error"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    async def test_global_handler_reports_to_monitoring(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger"), patch(f"{HANDLER_MODULE}.log_error") as mock_log_error:
            await global_exception_handler(mock_request, KeyError("k"))

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[1]["error_type"] == "KeyError"


class Payload(BaseModel):
    score: int = Field(ge=1, le=5)


@pytest.fixture
def handler_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Hunt", "h1")

    @app.post("/validate")
    async def validate(payload: Payload):
        return payload

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.mark.asyncio
class TestHandlersInApp:
    async def _client(self, app: FastAPI) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost")

    async def test_app_error(self, handler_app):
        async with await self._client(handler_app) as client:
            response = await client.get("/missing")

        assert response.status_code == 404
        assert response.json()["message"] == "Hunt h1 not found"

    async def test_validation_error_is_400(self, handler_app):
        async with await self._client(handler_app) as client:
            response = await client.post("/validate", json={"score": 9})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"][0]["loc"] == ["body", "score"]

    async def test_unknown_route(self, handler_app):
        async with await self._client(handler_app) as client:
            response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_method_not_allowed(self, handler_app):
        async with await self._client(handler_app) as client:
            response = await client.delete("/missing")

        assert response.status_code == 405
        assert response.json()["code"] == "METHOD_NOT_ALLOWED"

    async def test_unhandled_exception(self, handler_app):
        async with await self._client(handler_app) as client:
            with patch(f"{HANDLER_MODULE}.logger"):
                response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_SERVER_ERROR"
