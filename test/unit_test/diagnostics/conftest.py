import asyncio
from pathlib import Path

import pytest
from typer.testing import CliRunner

from whatsms.core.database import create_all, create_engine, create_sessionmaker


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch, tmp_path):
    """Run commands from an empty directory so no local .env is picked up."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sqlite_url(tmp_path: Path):
    """A file-backed SQLite database with the CRM schema. Returns ``(url, seed)``."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'crm.db'}"

    async def _seed(*entities) -> None:
        engine = create_engine(url)
        try:
            await create_all(engine)
            async with create_sessionmaker(engine)() as session:
                session.add_all(list(entities))
                await session.commit()
        finally:
            await engine.dispose()

    def seed(*entities) -> None:
        asyncio.run(_seed(*entities))

    return url, seed
