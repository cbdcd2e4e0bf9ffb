"""Shared fixtures: an in-memory SQLite database with the CRM schema."""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from whatsms.core.database import create_all, create_sessionmaker
from whatsms.core.database.entities import Contact, User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def contact(session: AsyncSession) -> Contact:
    entity = Contact(name="Ada Lovelace", phone="5511999990000")
    session.add(entity)
    await session.commit()
    await session.refresh(entity)
    return entity


@pytest_asyncio.fixture
async def author(session: AsyncSession) -> User:
    entity = User(username="agent.smith", name="Agent Smith", password="$2b$10$hash")
    session.add(entity)
    await session.commit()
    await session.refresh(entity)
    return entity
