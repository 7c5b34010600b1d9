"""CLI `listmonk-cli` (Typer + Rich).

Comandos de consulta sobre el cliente asíncrono; cada comando hace una sola
llamada al API (sin paginar automáticamente).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from listmonk.adapters.html_preview import extract_preview_metadata, html_to_text
from listmonk.adapters.json_exporter import export_model_json
from listmonk.cli import doctor
from listmonk.cli.session import run_with_client
from listmonk.cli.ui_components import (
    build_lists_table,
    build_preview_panel,
    build_subscribers_table,
)
from listmonk.core.domain.params import GetListsParams, GetSubscribersParams

app = typer.Typer(no_args_is_help=True, help="Query a listmonk instance from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every HTTP round trip."),
) -> None:
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("listmonk")


@app.command(name="lists")
def lists_command(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search by list name."),
    page: Optional[int] = typer.Option(None, "--page", min=1),
    per_page: Optional[int] = typer.Option(None, "--per-page", min=1),
) -> None:
    """Show mailing lists."""

    params = GetListsParams(query=query, page=page, per_page=per_page)
    result = run_with_client(lambda client: client.get_lists(params))
    _console.print(build_lists_table(result))


@app.command(name="subscribers")
def subscribers_command(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="SQL expression."),
    list_ids: Optional[list[int]] = typer.Option(None, "--list-id", help="Repeatable."),
    page: Optional[int] = typer.Option(None, "--page", min=1),
    per_page: Optional[int] = typer.Option(None, "--per-page", min=1),
) -> None:
    """Show subscribers matching a query and/or lists."""

    params = GetSubscribersParams(
        query=query,
        list_ids=list_ids or None,
        page=page,
        per_page=per_page,
    )
    result = run_with_client(lambda client: client.get_subscribers(params))
    _console.print(build_subscribers_table(result))


@app.command(name="export-subscriber")
def export_subscriber_command(
    subscriber_id: int = typer.Argument(..., help="Subscriber ID."),
    output: Path = typer.Option(..., "--output", "-o", help="Destination JSON file."),
) -> None:
    """Write a subscriber's data export (profile, subscriptions, views, clicks) to JSON."""

    export = run_with_client(lambda client: client.export_subscriber(subscriber_id))
    path = export_model_json(model=export, output_path=output)
    _console.print(f"[green]Export written to:[/green] {path}")


@app.command(name="campaign-preview")
def campaign_preview_command(
    campaign_id: int = typer.Argument(..., help="Campaign ID."),
    text: bool = typer.Option(False, "--text", help="Render as plain text instead of HTML."),
) -> None:
    """Print a campaign's rendered preview."""

    html = run_with_client(lambda client: client.get_campaign_preview(campaign_id))
    if not text:
        typer.echo(html)
        return

    meta = extract_preview_metadata(html=html)
    _console.print(build_preview_panel(title=meta.get("title"), text=html_to_text(html)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
