"""Jerarquía de errores del cliente.

Categorías:
- Transporte: URL inválida, fallo de red, timeout.
- Codificación: query string o cuerpo JSON no serializables (antes de la red).
- Protocolo: status HTTP distinto de 200 con envelope `{message}`.
- Decodificación: respuesta 200 cuyo cuerpo no encaja con la forma esperada.

`asyncio.CancelledError` nunca se envuelve: se propaga tal cual.
"""

from __future__ import annotations


class ListmonkError(Exception):
    """Base de todos los errores del cliente."""


class TransportError(ListmonkError):
    """Fallo de red antes de obtener una respuesta HTTP."""


class RequestTimeoutError(TransportError):
    pass


class InvalidURLError(TransportError):
    """La base URL o el path no forman una URL absoluta válida."""


class EncodingError(ListmonkError):
    """No se pudo serializar la petición; no se hizo ninguna llamada."""


class QueryEncodingError(EncodingError):
    pass


class BodyEncodingError(EncodingError):
    pass


class APIError(ListmonkError):
    """El servicio respondió con un status de error y un `{message}` válido."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"APIError(status_code={self.status_code}, message={self.message!r})"


class DecodeError(ListmonkError):
    """El cuerpo de la respuesta no coincide con la forma declarada."""


class MalformedErrorResponse(DecodeError):
    """Status de error cuyo cuerpo no es un envelope `{message}`.

    Conserva ambos fallos: el status HTTP original y el cuerpo crudo.
    """

    def __init__(self, message: str, *, status_code: int, body: bytes) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
