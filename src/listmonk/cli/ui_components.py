"""Componentes de UI para la CLI (Rich)."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from listmonk.core.domain.models import ListPage, SubscriberPage


def print_banner(console: Console, base_url: str) -> None:
    title = Text("listmonk-cli", style="bold cyan")
    subtitle = Text(base_url, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_lists_table(page: ListPage) -> Table:
    table = Table(title=f"Lists ({page.total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("Opt-in", style="magenta")
    table.add_column("Subscribers", style="green", justify="right")
    table.add_column("Tags", style="dim")
    for item in page.results:
        table.add_row(
            str(item.id),
            item.name,
            item.type.value,
            item.optin.value,
            str(item.subscriber_count),
            ", ".join(item.tags),
        )
    return table


def build_subscribers_table(page: SubscriberPage) -> Table:
    table = Table(title=f"Subscribers ({page.total}, page {page.page})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Email", style="white")
    table.add_column("Name", style="white")
    table.add_column("Status", style="green")
    table.add_column("Lists", style="dim")
    for sub in page.results:
        status_style = "red" if sub.status.value == "blocklisted" else "green"
        table.add_row(
            str(sub.id),
            sub.email,
            sub.name,
            Text(sub.status.value, style=status_style),
            ", ".join(s.name for s in sub.lists),
        )
    return table


def build_preview_panel(*, title: str | None, text: str) -> Panel:
    """Panel con el texto plano de una preview."""

    heading = Text(title or "Preview", style="bold yellow")
    return Panel(Text(text), title=heading, border_style="yellow")
