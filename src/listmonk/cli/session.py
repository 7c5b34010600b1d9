"""Construcción del cliente y ejecución de corutinas desde comandos síncronos."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console

from listmonk.adapters.client import ListmonkClient
from listmonk.core.config import ClientSettings
from listmonk.core.errors import APIError, ListmonkError

T = TypeVar("T")

_err_console = Console(stderr=True)


def build_client(settings: ClientSettings | None = None) -> ListmonkClient:
    return ListmonkClient(settings or ClientSettings())


def run_with_client(action: Callable[[ListmonkClient], Awaitable[T]]) -> T:
    """Ejecuta `action` con un cliente nuevo; errores del API -> exit code 1."""

    async def _runner() -> T:
        async with build_client() as client:
            return await action(client)

    try:
        return asyncio.run(_runner())
    except APIError as exc:
        _err_console.print(f"[red]HTTP {exc.status_code}:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc
    except ListmonkError as exc:
        _err_console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        raise typer.Exit(code=1) from exc
