"""
Async test configuration and fixtures for pytest.

Each test gets its own in-memory SQLite database (aiosqlite) with the full
schema, a session bound to it, and an HTTP client whose requests use fresh
sessions from the same database.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.async_session import get_async_db
from app.db.base_class import Base
from app.main import app as fastapi_app
from app.models.user_profile import UserProfile


@pytest.fixture
def profile_payload() -> dict:
    """Wire-format profile for the worked example (female, losing 10 kg)."""
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "age": 30,
        "gender": "FEMALE",
        "height": 165,
        "currWeight": 70,
        "desiredWeight": 60,
        "targetDays": 100,
    }


@pytest_asyncio.fixture
async def async_engine():
    """Create an async SQLAlchemy engine on a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine):
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create an async SQLAlchemy session for tests."""
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(async_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create an HTTP client against the app with the test database injected."""

    async def override_get_async_db():
        async with async_session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_async_db] = override_get_async_db

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    fastapi_app.dependency_overrides = {}


@pytest_asyncio.fixture
async def async_test_profile(async_db_session: AsyncSession) -> UserProfile:
    """Create the worked-example profile directly in the database."""
    profile = UserProfile(
        user_id="user-1",
        name="Asha Rao",
        email="asha@example.com",
        age=30,
        gender="FEMALE",
        height=165,
        curr_weight=70,
        desired_weight=60,
        target_days=100,
    )
    async_db_session.add(profile)
    await async_db_session.commit()
    return profile
