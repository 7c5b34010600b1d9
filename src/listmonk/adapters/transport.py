"""Primitiva de transporte: una petición autenticada, un round trip.

Responsabilidad:
- Unir la base URL configurada con el path del endpoint.
- Añadir el query string derivado del modelo de parámetros.
- Serializar el cuerpo JSON (solo POST/PUT; en otros métodos el cuerpo se
  codifica como query) o construir el multipart.
- Adjuntar `Authorization` estático y ejecutar contra el cliente inyectado.

No reintenta ni decodifica: devuelve la `httpx.Response` tal cual.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any, Union

import httpx
from loguru import logger
from pydantic import BaseModel

from listmonk.core.config import ClientSettings
from listmonk.core.errors import (
    BodyEncodingError,
    InvalidURLError,
    RequestTimeoutError,
    TransportError,
)
from listmonk.core.interfaces.http import AsyncHTTPClient
from listmonk.core.querystring import to_query_pairs

BODY_METHODS = frozenset({"POST", "PUT"})

FileContent = Union[IO[bytes], bytes]
FileSpec = Union[FileContent, tuple[str, FileContent], tuple[str, FileContent, str]]


@dataclass(frozen=True)
class ApiRequest:
    """Descriptor de una petición: se construye por llamada y se descarta."""

    method: str
    path: str
    query: BaseModel | Mapping[str, Any] | None = None
    body: BaseModel | Mapping[str, Any] | list[Any] | None = None
    timeout: float | None = None


def join_url(base_url: str, path: str) -> str:
    """Une `path` al path de `base_url` (conserva prefijos como `/listmonk`)."""

    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(f"invalid base URL {base_url!r}: {exc}") from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(f"base URL must be absolute http(s), got {base_url!r}")

    joined = url.path.rstrip("/") + "/" + path.lstrip("/")
    try:
        return str(url.copy_with(path=joined))
    except httpx.InvalidURL as exc:
        raise InvalidURLError(f"cannot join {path!r} to {base_url!r}: {exc}") from exc


def encode_json_body(body: BaseModel | Mapping[str, Any] | list[Any]) -> bytes:
    """Serializa el cuerpo a JSON UTF-8 (alias como claves, sin `None`)."""

    try:
        if isinstance(body, BaseModel):
            payload: Any = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = body
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise BodyEncodingError(f"cannot encode request body as JSON: {exc}") from exc


def _file_tuple(field: str, spec: FileSpec) -> tuple[Any, ...]:
    if isinstance(spec, tuple):
        return spec
    name = getattr(spec, "name", None)
    filename = os.path.basename(name) if isinstance(name, str) and name else field
    return (filename, spec)


class Transport:
    """Ejecuta `ApiRequest`s contra un `AsyncHTTPClient`."""

    def __init__(self, settings: ClientSettings, http_client: AsyncHTTPClient) -> None:
        self._settings = settings
        self._http = http_client
        self._auth = settings.authorization()

    def _headers(self, content_type: str | None = None) -> dict[str, str]:
        headers = {"Authorization": self._auth}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def send(self, request: ApiRequest) -> httpx.Response:
        method = request.method.upper()
        url = join_url(self._settings.base_url, request.path)
        params = to_query_pairs(request.query)

        content: bytes | None = None
        content_type: str | None = None
        if request.body is not None:
            if method in BODY_METHODS:
                content = encode_json_body(request.body)
                content_type = "application/json"
            else:
                # Sin cuerpo en GET/DELETE: los parámetros viajan en el query.
                params += to_query_pairs(request.body)

        kwargs: dict[str, Any] = {}
        if request.timeout is not None:
            kwargs["timeout"] = request.timeout

        http_request = self._http.build_request(
            method,
            url,
            params=params or None,
            content=content,
            headers=self._headers(content_type),
            **kwargs,
        )
        return await self._execute(http_request)

    async def send_multipart(
        self,
        path: str,
        *,
        fields: Mapping[str, str],
        files: Mapping[str, FileSpec],
        timeout: float | None = None,
    ) -> httpx.Response:
        """POST multipart/form-data: `fields` como partes de texto, `files` como ficheros."""

        url = join_url(self._settings.base_url, path)
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            http_request = self._http.build_request(
                "POST",
                url,
                data=dict(fields),
                files={key: _file_tuple(key, spec) for key, spec in files.items()},
                headers=self._headers(),
                **kwargs,
            )
        except (TypeError, ValueError) as exc:
            raise BodyEncodingError(f"cannot build multipart body: {exc}") from exc
        return await self._execute(http_request)

    async def _execute(self, http_request: httpx.Request) -> httpx.Response:
        method = http_request.method
        url = http_request.url
        try:
            response = await self._http.send(http_request)
        except httpx.TimeoutException as exc:
            logger.debug("{} {} timed out: {}", method, url, exc)
            raise RequestTimeoutError(f"{method} {url} timed out") from exc
        except httpx.InvalidURL as exc:
            raise InvalidURLError(f"{method} {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.debug("{} {} failed: {!r}", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("{} {} -> {}", method, url, response.status_code)
        return response
