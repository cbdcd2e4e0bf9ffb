"""Database connection debugger.

Reads DATABASE_URL, connects, runs a trivial query and counts users.
Exit code 0 on success, 1 on any failure.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from sqlalchemy import text

from whatsms.core.database.repositories import UserRepository
from whatsms.core.database.utils import create_engine, create_sessionmaker, mask_database_url
from whatsms.core.logging_config import setup_logging
from whatsms.server.core.config import Settings

app = typer.Typer(add_completion=False, help="Verify that the configured database is reachable.")

_console = Console()


@dataclass
class DatabaseCheckResult:
    connected: bool = False
    user_count: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.connected and self.user_count is not None


def _error_code(exc: Exception) -> Optional[str]:
    # Driver SQLSTATE (asyncpg/psycopg) first, then SQLAlchemy's own error code
    orig = getattr(exc, "orig", None)
    for candidate in (getattr(orig, "sqlstate", None), getattr(orig, "pgcode", None), getattr(exc, "code", None)):
        if candidate:
            return str(candidate)
    return None


async def check_database(db_url: str, *, echo: bool = False) -> DatabaseCheckResult:
    """Connect to ``db_url`` and count users.

    Args:
        db_url: Database connection URL
        echo: Log every SQL statement

    Returns:
        The outcome; failures are reported in the result, never raised
    """
    result = DatabaseCheckResult()
    engine = None
    try:
        engine = create_engine(db_url, echo=echo)
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        result.connected = True

        async with create_sessionmaker(engine)() as session:
            result.user_count = await UserRepository(session).count()
    except Exception as e:
        result.error = str(e)
        result.error_code = _error_code(e)
    finally:
        if engine is not None:
            await engine.dispose()
    return result


@app.command()
def main(
    echo: bool = typer.Option(False, "--echo", help="Log every SQL statement."),
) -> None:
    """Run the database connection checks."""
    setup_logging(log_level="DEBUG" if echo else "WARNING", log_format="simple", enable_file=False)
    if echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    _console.print("[bold]--- Database Connection Debugger ---[/bold]")

    settings = Settings()
    if not settings.database_url:
        _console.print("[red]❌ DATABASE_URL is missing from the environment/.env[/red]")
        raise typer.Exit(code=1)

    _console.print(f"URL Configured: {escape(mask_database_url(settings.database_url))}")
    _console.print("\n1. Testing connection...")

    result = asyncio.run(check_database(settings.database_url, echo=echo))

    if result.connected:
        _console.print("[green]✅ Connected Successfully![/green]")
    if result.ok:
        _console.print(f"[green]✅ Connection Verified. User count: {result.user_count}[/green]")
        return

    _console.print(f"[red]❌ Connection Failed:[/red] {escape(result.error or '')}")
    _console.print(f"Error Code: {result.error_code or 'n/a'}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
