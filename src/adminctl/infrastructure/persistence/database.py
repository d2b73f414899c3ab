"""Database abstraction layer using SQLAlchemy 2.0 async.

This module provides the database session management and engine configuration
for SQLAlchemy with async support. It supports both SQLite (aiosqlite) and
PostgreSQL (asyncpg) drivers.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from adminctl.core.config import Settings, get_settings
from adminctl.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class DatabaseManager:
    """Database connection and session manager.

    Owns the async engine and session factory. The engine is created lazily
    on first use and released by ``disconnect()``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the database manager.

        Args:
            settings: Optional settings instance. Defaults to the cached settings.
        """
        self.settings = settings or get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine.

        Returns:
            AsyncEngine: SQLAlchemy async engine instance.
        """
        if self._engine is None:
            if self.settings.is_sqlite:
                # SQLite pools don't accept sizing arguments
                self._engine = create_async_engine(
                    self.settings.database_url,
                    echo=self.settings.db_echo,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_async_engine(
                    self.settings.database_url,
                    echo=self.settings.db_echo,
                    pool_size=self.settings.db_pool_size,
                    max_overflow=self.settings.db_max_overflow,
                    pool_timeout=self.settings.db_pool_timeout,
                    pool_recycle=self.settings.db_pool_recycle,
                )

            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.debug("Database session factory created")
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all database tables.

        Development only. In production, use migrations instead.
        """
        # Register models with Base.metadata
        from adminctl.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created")

    async def disconnect(self) -> None:
        """Close the database engine and all connections.

        Safe to call more than once; only the first call disposes the engine.
        """
        if self._engine is not None:
            engine = self._engine
            self._engine = None
            self._session_factory = None
            await engine.dispose()
            logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional scope for database operations.

        Yields:
            AsyncSession: SQLAlchemy async session.

        Example:
            async with db.session() as session:
                result = await session.execute(select(UserModel))
                users = result.scalars().all()
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                logger.debug("Database connection check successful")
                return True
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False


# Global database manager instance
_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def init_database(db: DatabaseManager | None = None) -> None:
    """Initialize the database.

    Creates the SQLite data directory if needed, verifies connectivity and
    creates all tables.

    Args:
        db: Database manager to use. Defaults to the global manager.

    Raises:
        RuntimeError: If the database is unreachable.
    """
    db = db or get_db_manager()
    settings = db.settings

    if settings.is_sqlite:
        # Extract path from sqlite+aiosqlite:///path/to/file.db
        db_path = settings.database_url.split(":///")[-1]
        if db_path and db_path != ":memory:":
            db_dir = Path(db_path).parent
            db_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Database directory ready", path=str(db_dir))

    if not await db.check_connection():
        logger.error("Database connection failed")
        raise RuntimeError("Failed to connect to database")

    await db.create_tables()
