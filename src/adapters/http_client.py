"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, límites de tamaño y traducción de errores.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from dataclasses import dataclass

import httpx

from core.config import AppSettings
from core.domain.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedBody:
    """Cuerpo ya descargado (y acotado) de una respuesta."""

    url: str
    status_code: int
    content_type: str
    content: bytes
    encoding: str | None = None

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.encoding or "utf-8", errors="replace")
        except LookupError:
            # Charset desconocido anunciado por el servidor.
            return self.content.decode("utf-8", errors="replace")

    @property
    def is_json(self) -> bool:
        media = self.content_type.split(";", 1)[0].strip().lower()
        return media == "application/json" or media.endswith("+json")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambos endpoints se comporten igual.
    - El timeout siempre está acotado (`http_timeout_seconds`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_body(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: Mapping[str, str],
    endpoint: str,
    max_bytes: int,
    passthrough_statuses: Collection[int] = (),
) -> FetchedBody:
    """GET acotado: una sola petición, sin reintentos.

    - Timeout / conexión / protocolo => `NetworkError`.
    - Status fuera de 2xx (y no listado en `passthrough_statuses`) => `NetworkError`.
    - Cuerpo mayor que `max_bytes` => `ParseError` (se corta la descarga).
    """

    logger.debug("GET %s params=%s (%s)", url, dict(params), endpoint)
    try:
        async with client.stream("GET", url, params=params) as response:
            status = response.status_code
            if not response.is_success and status not in passthrough_statuses:
                raise NetworkError(
                    f"{endpoint} answered HTTP {status}",
                    endpoint=endpoint,
                    status_code=status,
                )

            declared = response.headers.get("Content-Length")
            if declared and declared.isdigit() and int(declared) > max_bytes:
                raise ParseError(
                    f"{endpoint} response too large ({declared} bytes)",
                    endpoint=endpoint,
                )

            chunks: list[bytes] = []
            size = 0
            async for chunk in response.aiter_bytes():
                size += len(chunk)
                if size > max_bytes:
                    raise ParseError(
                        f"{endpoint} response exceeds {max_bytes} bytes",
                        endpoint=endpoint,
                    )
                chunks.append(chunk)

            return FetchedBody(
                url=str(response.url),
                status_code=status,
                content_type=response.headers.get("Content-Type", ""),
                content=b"".join(chunks),
                encoding=response.charset_encoding,
            )
    except httpx.TimeoutException as exc:
        raise NetworkError(f"{endpoint} timed out", endpoint=endpoint) from exc
    except httpx.HTTPError as exc:
        raise NetworkError(
            f"{endpoint} unreachable: {exc.__class__.__name__}",
            endpoint=endpoint,
        ) from exc
