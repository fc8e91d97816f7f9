"""
Unit tests for AsyncDatabaseManager engine setup.
"""

import pytest

from app.db.async_session import AsyncDatabaseManager


@pytest.mark.asyncio
async def test_manager_uses_database_url_as_given():
    manager = AsyncDatabaseManager(database_url="sqlite+aiosqlite:///./fitplan.db")
    try:
        assert manager.async_engine.url.drivername == "sqlite+aiosqlite"
        assert manager.async_engine.url.database == "./fitplan.db"
    finally:
        await manager.close()


@pytest.mark.asyncio
async def test_manager_is_closed_after_close():
    manager = AsyncDatabaseManager(database_url="sqlite+aiosqlite://")

    await manager.close()

    assert manager.async_engine is None
    assert manager.async_session_factory is None
