"""Shared fixtures for unit tests: in-memory database and seeded records."""

from __future__ import annotations

from typing import AsyncGenerator, Awaitable, Callable

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from scavenger_hunt_ai.core.database import create_all, create_engine, create_sessionmaker
from scavenger_hunt_ai.core.database.entities.hunts import Hunt
from scavenger_hunt_ai.core.database.entities.users import User
from scavenger_hunt_ai.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@pytest_asyncio.fixture
async def make_user(repos: SqlRepoBundle) -> Callable[..., Awaitable[User]]:
    """Factory persisting a user."""

    async def _make(name: str = "Mia", age_group: str = "9-12", **kwargs) -> User:
        return await repos.users.create(User(name=name, age_group=age_group, **kwargs))

    return _make


@pytest_asyncio.fixture
async def make_hunt(repos: SqlRepoBundle) -> Callable[..., Awaitable[Hunt]]:
    """Factory persisting a hunt for a user."""

    async def _make(user: User, **overrides) -> Hunt:
        fields = {
            "title": "Backyard Treasure",
            "theme": "pirates",
            "difficulty": "easy",
            "location_type": "indoor",
            "duration": 30,
            "age_group": user.age_group,
        }
        fields.update(overrides)
        return await repos.hunts.create(Hunt(user_id=user.id, **fields))

    return _make
