"""Constructor del `httpx.AsyncClient` por defecto.

Centraliza timeout, User-Agent y `Accept` para que un cliente sin transporte
inyectado se comporte igual que uno configurado a mano.
"""

from __future__ import annotations

import httpx

from listmonk.core.config import ClientSettings


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    La autenticación no va aquí: la añade el transporte en cada petición,
    también cuando el cliente HTTP lo aporta el llamador.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
