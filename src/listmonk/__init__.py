"""Cliente asíncrono y tipado para el API REST de listmonk."""

from __future__ import annotations

from loguru import logger

from listmonk.adapters.client import ListmonkClient
from listmonk.core.config import ClientSettings
from listmonk.core.errors import (
    APIError,
    BodyEncodingError,
    DecodeError,
    EncodingError,
    InvalidURLError,
    ListmonkError,
    MalformedErrorResponse,
    QueryEncodingError,
    RequestTimeoutError,
    TransportError,
)

# Librería silenciosa por defecto: `logger.enable("listmonk")` para ver trazas.
logger.disable("listmonk")

__all__ = [
    "APIError",
    "BodyEncodingError",
    "ClientSettings",
    "DecodeError",
    "EncodingError",
    "InvalidURLError",
    "ListmonkClient",
    "ListmonkError",
    "MalformedErrorResponse",
    "QueryEncodingError",
    "RequestTimeoutError",
    "TransportError",
]
