"""
Unit tests for the request timing middleware.

Tests cover the X-Process-Time header, monitoring hooks, slow request
warnings and failing requests.
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from scavenger_hunt_ai.server.middleware import RequestTimingMiddleware

MIDDLEWARE_MODULE = "scavenger_hunt_ai.server.middleware.timing"

pytestmark = pytest.mark.asyncio


@pytest.fixture
def timed_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestTimingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    @app.get("/fail")
    async def fail():
        raise RuntimeError("broken")

    return app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost")


async def test_sets_process_time_header(timed_app):
    async with _client(timed_app) as client:
        response = await client.get("/ping")

    assert response.status_code == 200
    assert float(response.headers["X-Process-Time"]) >= 0


async def test_reports_request_to_monitoring(timed_app):
    with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
        async with _client(timed_app) as client:
            await client.get("/ping")

    mock_log.assert_called_once()
    kwargs = mock_log.call_args[1]
    assert kwargs["method"] == "GET"
    assert kwargs["path"] == "/ping"
    assert kwargs["status_code"] == 200


async def test_warns_about_slow_requests(timed_app):
    with patch(f"{MIDDLEWARE_MODULE}.SLOW_REQUEST_MS", -1), patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger:
        async with _client(timed_app) as client:
            await client.get("/ping")

    mock_logger.warning.assert_called_once()
    assert "Slow API request: GET /ping" in mock_logger.warning.call_args[0][0]


async def test_fast_request_does_not_warn(timed_app):
    with patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger:
        async with _client(timed_app) as client:
            await client.get("/ping")

    mock_logger.warning.assert_not_called()


async def test_failed_request_is_logged(timed_app):
    with patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger, patch(
        f"{MIDDLEWARE_MODULE}.log_api_request"
    ) as mock_log:
        async with _client(timed_app) as client:
            response = await client.get("/fail")

    assert response.status_code == 500
    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args[1]["extra"]["error"] == "broken"
    assert mock_log.call_args[1]["status_code"] == 500
