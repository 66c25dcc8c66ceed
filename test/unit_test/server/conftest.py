"""Fixtures for server tests: HTTP client with overridden dependencies and auth helpers."""

import asyncio
from typing import AsyncGenerator, Awaitable, Callable, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from scavenger_hunt_ai.core.database import get_session
from scavenger_hunt_ai.generation import build_default_registry
from scavenger_hunt_ai.server.main import app
from scavenger_hunt_ai.server.services.generation import HuntGenerationService, get_generation_service
from scavenger_hunt_ai.server.services.notifier import HuntNotifier, get_notifier

TEST_IMAGE_BASE_URL = "https://img.test"


@pytest_asyncio.fixture
async def notifier() -> HuntNotifier:
    return HuntNotifier()


@pytest_asyncio.fixture
async def generation_service(session_factory, notifier) -> HuntGenerationService:
    """Generation service bound to the test database."""
    return HuntGenerationService(
        session_factory,
        notifier,
        registry_factory=lambda: build_default_registry(TEST_IMAGE_BASE_URL),
        timeout_seconds=5,
    )


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_factory, notifier, generation_service) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies."""

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_generation_service] = lambda: generation_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def register(client: AsyncClient) -> Callable[..., Awaitable[Dict]]:
    """Create a player through the API and return its user, token and auth headers."""

    async def _register(name: str = "Mia", age_group: str = "9-12") -> Dict:
        response = await client.post("/api/v1/users", json={"name": name, "age_group": age_group})
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return {"user": data["user"], "token": data["token"], "headers": {"Authorization": f"Bearer {data['token']}"}}

    return _register


@pytest_asyncio.fixture
async def wait_for_status(client: AsyncClient) -> Callable[..., Awaitable[Dict]]:
    """Poll a hunt's status until it leaves GENERATING."""

    async def _wait(hunt_id: str, attempts: int = 100) -> Dict:
        status = {}
        for _ in range(attempts):
            response = await client.get(f"/api/v1/hunts/{hunt_id}/status")
            status = response.json()["data"]
            if status["status"] != "GENERATING":
                return status
            await asyncio.sleep(0.01)
        return status

    return _wait
