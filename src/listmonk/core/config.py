"""Configuración del cliente.

- Centraliza variables de entorno (pydantic-settings, prefijo `LISTMONK_`).
- Una instancia es inmutable: respalda un único `ListmonkClient` durante toda
  su vida.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "listmonk-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "listmonk-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "listmonk-client"
    return Path.home() / ".config" / "listmonk-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# listmonk-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración de conexión a una instancia de listmonk."""

    model_config = SettingsConfigDict(
        env_prefix="LISTMONK_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:9000",
        min_length=1,
        description="URL base de la instancia (p.ej. https://lists.example.com).",
    )
    api_user: str = Field(
        default="",
        description="Usuario API creado en Admin -> Users.",
    )
    api_token: SecretStr = Field(
        default=SecretStr(""),
        description="Token del usuario API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="listmonk-client/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    def authorization(self) -> str:
        """Valor estático de la cabecera `Authorization`."""

        return f"token {self.api_user}:{self.api_token.get_secret_value()}"
