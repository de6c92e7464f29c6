"""Fuente secundaria: proxy de caché.

Contrato equivalente al primario pero solo JSON.

Notas:
- 404 => la consulta no está en caché (`None`), no es un error.
- Sin `cache_url` configurada la fuente no debe instanciarse.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client, fetch_body
from adapters.response_parser import parse_candidates
from core.config import AppSettings
from core.domain.models import CandidateList, LookupSource, Query
from core.interfaces.word_source import WordSource

logger = logging.getLogger(__name__)


class CacheProxySource(WordSource):
    name = "cache"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        if not self._settings.cache_url:
            raise ValueError("cache_url is not configured")
        self._url = self._settings.cache_url
        self._transport = transport

    async def fetch(self, query: Query) -> CandidateList | None:
        params = {self._settings.cache_query_param: query.text}

        async with build_async_client(
            self._settings,
            extra_headers={"Accept": "application/json"},
            transport=self._transport,
        ) as client:
            body = await fetch_body(
                client,
                self._url,
                params=params,
                endpoint=self.name,
                max_bytes=self._settings.max_response_bytes,
                passthrough_statuses=(404,),
            )

        if body.status_code == 404:
            logger.debug("cache: miss for %r", query.text)
            return None

        words = parse_candidates(body, limit=self._settings.max_candidates)
        return CandidateList(query=query.text, words=words, source=LookupSource.CACHE)
