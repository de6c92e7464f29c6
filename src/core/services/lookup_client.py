"""Lookup Client: consulta → lista de candidatos.

Flujo de `lookup`:
1. Valida la consulta en el cliente (nunca se envía una consulta inválida).
2. Si hay caché configurada, la consulta primero. Un hit se devuelve tal cual;
   un miss o un fallo de la caché se registra y se pasa al primario.
3. Consulta el endpoint primario. Sus errores se propagan al llamador.

Sin reintentos ni estado entre llamadas.
"""

from __future__ import annotations

import logging

import httpx

from adapters.word_sources import CacheProxySource, PrimaryDictionarySource
from core.config import AppSettings
from core.domain.models import CandidateList, Query
from core.domain.query import validate_query
from core.interfaces.word_source import WordSource

logger = logging.getLogger(__name__)


class LookupClient:
    def __init__(
        self,
        primary: WordSource,
        *,
        cache: WordSource | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._primary = primary
        self._cache = cache
        self._settings = settings or AppSettings()

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "LookupClient":
        """Construye el cliente con las fuentes HTTP reales."""

        settings = settings or AppSettings()
        primary = PrimaryDictionarySource(settings, transport=transport)
        cache = CacheProxySource(settings, transport=transport) if settings.cache_url else None
        return cls(primary, cache=cache, settings=settings)

    @property
    def has_cache(self) -> bool:
        return self._cache is not None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def validate(self, query: str) -> Query:
        return validate_query(query, max_length=self._settings.max_query_length)

    async def lookup(self, query: str | Query) -> CandidateList:
        parsed = query if isinstance(query, Query) else self.validate(query)

        if self._cache is not None:
            cached = await self._try_cache(self._cache, parsed)
            if cached is not None:
                return cached

        result = await self._primary.fetch(parsed)
        if result is None:
            # El primario es la fuente autoritativa: sin respuesta = sin coincidencias.
            return CandidateList(query=parsed.text)
        return result

    async def _try_cache(self, cache: WordSource, query: Query) -> CandidateList | None:
        # Cualquier fallo de la caché cuenta como miss; solo el primario propaga.
        try:
            result = await cache.fetch(query)
        except Exception:
            logger.warning("cache unavailable, falling back to primary")
            logger.debug("cache failure for %r", query.text, exc_info=True)
            return None

        if result is not None:
            logger.debug("cache: hit for %r (%d words)", query.text, len(result.words))
        return result
