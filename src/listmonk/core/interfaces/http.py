"""Contrato del cliente HTTP inyectable.

Cualquier objeto con la interfaz `build_request`/`send` de
`httpx.AsyncClient` sirve: un cliente real, uno con `MockTransport` en
tests, o uno con proxies/limits propios del llamador.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Contrato mínimo que usa el transporte.

    Reglas:
    - `send` hace exactamente un round trip y no reintenta.
    - La concurrencia del pool de conexiones es asunto del propio cliente.
    """

    def build_request(self, method: str, url: Any, **kwargs: Any) -> httpx.Request:
        ...

    async def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response:
        ...

    async def aclose(self) -> None:
        ...
