"""WhatsApp Business API connection test.

Test 1 reads the business phone number with the access token; test 2 sends
the ``hello_world`` template to a test recipient. Exit code 0 when every test
that ran succeeded, 1 otherwise.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from pydantic import ValidationError
from rich.markup import escape

from whatsms import whatsapp
from whatsms.core.database.repositories import SystemConfigRepository
from whatsms.core.database.utils import create_engine, create_sessionmaker
from whatsms.core.logging_config import setup_logging
from whatsms.server.core import constant
from whatsms.server.core.config import Settings

app = typer.Typer(add_completion=False, help="Verify WhatsApp Business API credentials.")

_console = Console()


class CredentialsError(Exception):
    """Credentials cannot be looked up with the current configuration."""


@dataclass
class Credentials:
    access_token: Optional[str]
    phone_number_id: Optional[str]
    source: str

    @property
    def complete(self) -> bool:
        return bool(self.access_token and self.phone_number_id)


async def load_credentials_from_db(db_url: str) -> Dict[str, str]:
    """Read the ``accessToken``/``phoneNumberId`` system settings."""
    engine = create_engine(db_url)
    try:
        async with create_sessionmaker(engine)() as session:
            return await SystemConfigRepository(session).get_values(
                [constant.ACCESS_TOKEN_KEY, constant.PHONE_NUMBER_ID_KEY]
            )
    finally:
        await engine.dispose()


def resolve_credentials(
    settings: Settings,
    *,
    access_token: Optional[str] = None,
    phone_number_id: Optional[str] = None,
    from_db: bool = False,
) -> Credentials:
    """Pick each credential from the options, then the environment, then (with ``from_db``) the database.

    Raises:
        CredentialsError: ``from_db`` is needed but DATABASE_URL is unset
    """
    if access_token or phone_number_id:
        return Credentials(
            access_token or settings.whatsapp.access_token,
            phone_number_id or settings.whatsapp.phone_number_id,
            "options",
        )
    env = Credentials(settings.whatsapp.access_token, settings.whatsapp.phone_number_id, "environment")
    if env.complete or not from_db:
        return env
    if not settings.database_url:
        raise CredentialsError("--from-db requires DATABASE_URL")
    stored = asyncio.run(load_credentials_from_db(settings.database_url))
    return Credentials(
        env.access_token or stored.get(constant.ACCESS_TOKEN_KEY),
        env.phone_number_id or stored.get(constant.PHONE_NUMBER_ID_KEY),
        "database",
    )


def _print_api_error(error: whatsapp.WhatsAppApiError) -> None:
    payload: Any = error.details if error.details is not None else str(error)
    if isinstance(payload, (dict, list)):
        _console.print_json(data=payload)
    else:
        _console.print(escape(str(payload)))


async def run_checks(
    client: whatsapp.WhatsAppClient,
    *,
    recipient: Optional[str],
    template: str = "hello_world",
    language: str = "en_US",
) -> bool:
    """Run test 1 and, when a recipient is given, test 2. Stops at the first failure."""
    _console.print("\n[bold]--- Test 1: Verifying Phone Number ID ---[/bold]")
    try:
        info = await client.get_phone_number()
    except whatsapp.WhatsAppApiError as e:
        _console.print("[red]❌ Failed to verify Phone ID:[/red]")
        _print_api_error(e)
        return False
    except ValidationError as e:
        _console.print("[red]❌ Failed to verify Phone ID: unexpected response[/red]")
        _console.print(escape(str(e)))
        return False
    _console.print(f"[green]✅ Phone ID verified. Associated with:[/green] {escape(str(info.verified_name))}")

    if not recipient:
        _console.print("\n[yellow]Skipping Test 2: no recipient (use --to or WHATSAPP_TEST_RECIPIENT).[/yellow]")
        return True

    to = whatsapp.normalize_phone(recipient)
    _console.print(f"\n[bold]--- Test 2: Sending {escape(template)} to {to} ---[/bold]")
    try:
        response = await client.send_template_message(to, template, language)
    except whatsapp.WhatsAppApiError as e:
        _console.print("[red]❌ Failed to send message:[/red]")
        _print_api_error(e)
        return False
    except ValidationError as e:
        _console.print("[red]❌ Failed to send message: unexpected response[/red]")
        _console.print(escape(str(e)))
        return False
    _console.print("[green]✅ Message Sent Successfully![/green]")
    _console.print("Response:")
    _console.print_json(data=response.model_dump(mode="json", exclude_none=True))
    return True


async def _run(settings: Settings, credentials: Credentials, **kwargs: Any) -> bool:
    async with whatsapp.build_client(
        settings.whatsapp,
        access_token=credentials.access_token,
        phone_number_id=credentials.phone_number_id,
    ) as client:
        return await run_checks(client, **kwargs)


@app.command()
def main(
    to: Optional[str] = typer.Option(None, "--to", help="Recipient for the template test (defaults to WHATSAPP_TEST_RECIPIENT)."),
    template: str = typer.Option("hello_world", "--template", help="Approved template to send."),
    language: str = typer.Option("en_US", "--language", help="Template language code."),
    token: Optional[str] = typer.Option(None, "--token", help="Access token (overrides WHATSAPP_ACCESS_TOKEN)."),
    phone_number_id: Optional[str] = typer.Option(
        None, "--phone-number-id", help="Phone number id (overrides WHATSAPP_PHONE_NUMBER_ID)."
    ),
    from_db: bool = typer.Option(False, "--from-db", help="Read credentials from the SystemConfig table."),
) -> None:
    """Run the WhatsApp connection tests."""
    setup_logging(log_level="WARNING", log_format="simple", enable_file=False)
    _console.print("[bold]--- Starting WhatsApp Connection Test ---[/bold]")

    settings = Settings()
    try:
        credentials = resolve_credentials(
            settings, access_token=token, phone_number_id=phone_number_id, from_db=from_db
        )
    except CredentialsError as e:
        _console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except Exception as e:
        _console.print(f"[red]❌ Could not read credentials from the database:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    _console.print(f"Credentials found ({credentials.source}):")
    _console.print(f"Token: {escape(whatsapp.mask_token(credentials.access_token))}")
    _console.print(f"Phone ID: {escape(credentials.phone_number_id or 'MISSING')}")

    if not credentials.complete:
        _console.print(f"[red]❌ Missing credentials in {credentials.source}.[/red]")
        raise typer.Exit(code=1)

    ok = asyncio.run(
        _run(
            settings,
            credentials,
            recipient=to or settings.whatsapp.test_recipient,
            template=template,
            language=language,
        )
    )
    if not ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
