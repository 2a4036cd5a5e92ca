"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from funshop.core.logging_config import get_logger
from funshop.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates every table missing from the configured database and makes sure
    the bootstrap administrator account and the default categories exist.
    Tables that already exist, e.g. because Alembic created them, are left
    untouched.
    """
    from funshop.server.services.bootstrap import ensure_admin, ensure_categories

    await create_all(engine)
    async with async_session_maker() as session:
        await ensure_admin(session)
        await ensure_categories(session)
    logger.info("Database initialized")
