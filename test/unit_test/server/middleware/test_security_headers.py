"""
Unit tests for the security headers middleware.
"""

import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from scavenger_hunt_ai.server.main import app as main_app
from scavenger_hunt_ai.server.middleware import SecurityHeadersMiddleware
from scavenger_hunt_ai.server.middleware.security_headers import SECURITY_HEADERS

pytestmark = pytest.mark.asyncio


@pytest.fixture
def guarded_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    @app.get("/framed")
    async def framed():
        return JSONResponse({"ok": True}, headers={"X-Frame-Options": "DENY"})

    return app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost")


async def test_sets_security_headers(guarded_app):
    async with _client(guarded_app) as client:
        response = await client.get("/ping")

    for name, value in SECURITY_HEADERS.items():
        assert response.headers[name] == value


async def test_keeps_headers_set_by_route(guarded_app):
    async with _client(guarded_app) as client:
        response = await client.get("/framed")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


async def test_error_responses_carry_headers(guarded_app):
    async with _client(guarded_app) as client:
        response = await client.get("/missing")

    assert response.status_code == 404
    assert response.headers["X-Content-Type-Options"] == "nosniff"


async def test_main_app_sends_security_headers():
    async with _client(main_app) as client:
        response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Process-Time" in response.headers
