"""Codificación de modelos de parámetros a query string.

Reglas de mapeo (por campo del modelo, en orden de declaración):
- La clave es el alias del campo (o su nombre si no tiene alias).
- `None` se omite; cualquier otro valor se envía, incluidos `0`, `False` y "".
- Listas/tuplas repiten la clave una vez por elemento, en orden.
- bool -> "true"/"false"; Enum -> su valor; datetime/date -> ISO-8601;
  UUID -> forma canónica.
- Campos con `exclude=True` no se envían.
- Cualquier otro tipo (modelos anidados, dicts, bytes...) es un error.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from listmonk.core.errors import QueryEncodingError

QueryPairs = list[tuple[str, str]]


def _scalar_to_str(key: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    raise QueryEncodingError(
        f"unsupported query value for {key!r}: {type(value).__name__}"
    )


def _iter_fields(params: BaseModel | Mapping[str, Any]):
    if isinstance(params, BaseModel):
        fields = type(params).model_fields
        for name, info in fields.items():
            if info.exclude:
                continue
            yield info.alias or name, getattr(params, name)
        return
    if isinstance(params, Mapping):
        yield from params.items()
        return
    raise QueryEncodingError(f"unsupported query source: {type(params).__name__}")


def to_query_pairs(params: BaseModel | Mapping[str, Any] | None) -> QueryPairs:
    """Convierte un modelo (o mapping) en pares `(clave, valor)` ordenados."""

    if params is None:
        return []

    pairs: QueryPairs = []
    for key, value in _iter_fields(params):
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is None:
                    continue
                pairs.append((key, _scalar_to_str(key, item)))
            continue
        pairs.append((key, _scalar_to_str(key, value)))
    return pairs

