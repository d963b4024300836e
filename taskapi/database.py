"""
Task API - Database Module

SQLite connection management using async SQLAlchemy (aiosqlite driver).
"""

import logging
from pathlib import Path
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from taskapi.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


class Database:
    """SQLite connection manager.

    Created once per process; the application lifespan calls connect() on
    startup and disconnect() on shutdown.
    """

    engine: Optional[AsyncEngine] = None
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self, path: Optional[str] = None) -> None:
        """Open the engine and make sure all tables exist."""
        path = path or settings.DATABASE_PATH
        Path(path).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_async_engine(
            f"sqlite+aiosqlite:///{path}",
            echo=settings.LOG_LEVEL.upper() == "DEBUG",
        )
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

        # Import models so they register on Base.metadata
        from taskapi.auth import models as _auth_models  # noqa: F401
        from taskapi.tasks import models as _task_models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Connection to database established: {path}")

    async def reset(self) -> None:
        """Drop and recreate every table."""
        async with self.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database reset successfully")

    async def disconnect(self) -> None:
        """Dispose the engine."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Database connection closed")

    def get_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.engine

    def session(self) -> AsyncSession:
        """Open a new session bound to the engine."""
        if self.session_factory is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.session_factory()


# Singleton database instance
database = Database()


async def get_session() -> AsyncIterator[AsyncSession]:
    """Dependency that yields one session per request."""
    async with database.session() as session:
        yield session
