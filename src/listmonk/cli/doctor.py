"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from listmonk.cli import session
from listmonk.cli.ui_components import print_banner
from listmonk.core.config import ClientSettings, write_user_env_vars
from listmonk.core.domain.params import GetListsParams
from listmonk.core.errors import APIError, ListmonkError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: ClientSettings) -> tuple[bool, str]:
    """Authenticated round trip against `GET /api/lists?per_page=1`."""

    try:
        async with session.build_client(settings) as client:
            page = await client.get_lists(GetListsParams(per_page=1))
        return True, f"{page.total} lists visible"
    except APIError as exc:
        return False, f"HTTP {exc.status_code}: {exc.message}"
    except ListmonkError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()
    print_banner(_console, settings.base_url)

    table = Table(title="listmonk-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    if settings.api_user and settings.api_token.get_secret_value():
        table.add_row("Credentials", "OK", f"API user {settings.api_user}")
    else:
        table.add_row("Credentials", "MISSING", "Set LISTMONK_API_USER / LISTMONK_API_TOKEN")

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] run `listmonk-cli doctor setup` to store credentials."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    base_url = typer.prompt("listmonk base URL", default="http://localhost:9000").strip()
    api_user = typer.prompt("API user").strip()
    api_token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not api_user or not api_token:
        raise typer.BadParameter("base URL, API user and token are required")

    env_path = write_user_env_vars(
        {
            "LISTMONK_BASE_URL": base_url,
            "LISTMONK_API_USER": api_user,
            "LISTMONK_API_TOKEN": api_token,
        }
    )

    _console.print(f"[green]Saved listmonk config to:[/green] {env_path}")
