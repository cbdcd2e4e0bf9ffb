"""
Process-wide engine and session factory for the API server.

The engine points at DATABASE_URL, or at the local SQLite file when it is unset.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from whatsms.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

engine = create_engine(settings.effective_database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request, closed afterwards."""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Create tables for the local SQLite database.

    With DATABASE_URL set the schema belongs to Alembic and nothing is created.
    """
    if settings.database_url:
        return
    await create_all(engine)
