"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.

Nota: los parámetros de la consulta (`QueryOptions`) no son configurables;
aquí solo vive lo que rodea al request (endpoint, UA, timeout).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ddg-answers"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ddg-answers"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ddg-answers"
    return Path.home() / ".config" / "ddg-answers"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DDG_ANSWERS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.duckduckgo.com/",
        min_length=8,
        description="Endpoint de la Instant Answer API.",
    )
    client_id: str = Field(
        default="duckduckgo-answers",
        min_length=1,
        description="Identificador de cliente enviado en el parámetro `t`.",
    )
    user_agent: str = Field(
        default="ddg-answers/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). Sin valor: espera indefinida.",
    )
