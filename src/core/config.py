"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/parsers) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "puzzelzoeker"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "puzzelzoeker"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "puzzelzoeker"
    return Path.home() / ".config" / "puzzelzoeker"


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


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Valores `None` se ignoran (no borran lo existente).
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# puzzelzoeker user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUZZELZOEKER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    # Endpoint primario (puzzelwoordenboek de terceros)
    primary_url: str = Field(
        default="https://www.puzzelwoordenboek.nl/zoeken",
        min_length=8,
        description="URL del puzzelwoordenboek (endpoint primario).",
    )
    primary_query_param: str = Field(
        default="q",
        min_length=1,
        description="Nombre del query param que lleva el término buscado.",
    )
    primary_result_selector: str = Field(
        default=".results li",
        min_length=1,
        description="Selector CSS de cada palabra candidata en la respuesta HTML.",
    )
    primary_container_selector: str = Field(
        default=".results",
        min_length=1,
        description="Selector CSS del contenedor de resultados (vacío => sin resultados).",
    )
    primary_no_results_marker: str = Field(
        default="geen resultaten",
        min_length=1,
        description="Texto que indica 'sin coincidencias' en la página HTML.",
    )

    # Proxy de caché (opcional)
    cache_url: str | None = Field(
        default=None,
        description="URL del proxy de caché. Sin valor => caché desactivada.",
    )
    cache_query_param: str = Field(
        default="q",
        min_length=1,
        description="Query param del proxy de caché.",
    )

    http_timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        le=60,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="puzzelzoeker/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones.",
    )

    max_query_length: int = Field(
        default=32,
        ge=1,
        le=64,
        description="Longitud máxima de una consulta (tras normalizar).",
    )
    max_response_bytes: int = Field(
        default=2_000_000,
        ge=1_024,
        description="Tamaño máximo aceptado del cuerpo de respuesta.",
    )
    max_candidates: int = Field(
        default=500,
        ge=1,
        description="Número máximo de candidatos que se conservan por consulta.",
    )
    debounce_seconds: float = Field(
        default=0.25,
        ge=0,
        le=5,
        description="Espera antes de lanzar una consulta en modo interactivo.",
    )

    debug: bool = Field(
        default=False,
        description="Activa logging verboso (nunca en producción).",
    )
    default_language: Language = Field(
        default=Language.DUTCH,
        description="Idioma por defecto de los mensajes (en/nl).",
    )
