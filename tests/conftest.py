"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from adminctl.core.config import Settings, get_settings
from adminctl.infrastructure.persistence import models  # noqa: F401
from adminctl.infrastructure.persistence.database import Base, DatabaseManager


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test load settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        environment="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'adminctl.db'}",
        log_format="console",
        log_level="WARNING",
    )


@pytest.fixture
def db_manager(test_settings: Settings) -> DatabaseManager:
    """Database manager bound to the temporary SQLite file."""
    return DatabaseManager(test_settings)
