"""Decodificación de respuestas del API.

Reglas:
- El cuerpo se lee una única vez (`response.content`).
- Status distinto de 200 -> objeto JSON `{message}` -> `APIError` (mensaje
  vacío si falta la clave); si el cuerpo no es un objeto JSON ->
  `MalformedErrorResponse`.
- Status 200 -> se decodifica según la `ResponseShape` del endpoint, que es
  un hecho estático por endpoint y nunca se infiere del cuerpo.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from listmonk.core.domain.models import DataEnvelope, ErrorEnvelope
from listmonk.core.errors import APIError, DecodeError, MalformedErrorResponse

SUCCESS_STATUS = httpx.codes.OK


class ResponseShape(str, Enum):
    ENVELOPE = "envelope"  # {"data": T}
    BARE = "bare"  # T sin envolver
    TEXT = "text"  # cuerpo crudo (HTML de previews)
    IGNORE = "ignore"  # solo importa el status


@lru_cache(maxsize=None)
def _adapter(shape: ResponseShape, result_type: Any) -> TypeAdapter[Any]:
    if shape is ResponseShape.ENVELOPE:
        return TypeAdapter(DataEnvelope[result_type])
    return TypeAdapter(result_type)


def raise_for_error(response: httpx.Response, body: bytes) -> None:
    """Convierte un status de error en `APIError` (o `MalformedErrorResponse`)."""

    status = response.status_code
    if status == SUCCESS_STATUS:
        return

    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("HTTP {} with undecodable error body ({} bytes)", status, len(body))
        raise MalformedErrorResponse(
            f"HTTP {status}: error response is not a {{message}} envelope",
            status_code=status,
            body=body,
        ) from exc

    logger.debug("HTTP {}: {}", status, envelope.message)
    raise APIError(envelope.message, status_code=status)


def decode_response(
    response: httpx.Response,
    shape: ResponseShape,
    result_type: Any = Any,
) -> Any:
    """Devuelve el payload tipado de `response` según `shape`."""

    body = response.content
    raise_for_error(response, body)

    if shape is ResponseShape.IGNORE:
        return None
    if shape is ResponseShape.TEXT:
        return response.text

    try:
        value = _adapter(shape, result_type).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"response body does not match {shape.value} {_type_name(result_type)}: {exc}"
        ) from exc

    if shape is ResponseShape.ENVELOPE:
        return value.data
    return value


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)
