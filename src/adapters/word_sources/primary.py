"""Fuente primaria: puzzelwoordenboek de terceros.

Implementación:
- `GET {primary_url}?{primary_query_param}={consulta}`.
- La respuesta puede ser HTML (scraping con BeautifulSoup) o JSON.
- Cualquier status fuera de 2xx es `NetworkError`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client, fetch_body
from adapters.response_parser import HtmlSelectors, parse_candidates
from core.config import AppSettings
from core.domain.models import CandidateList, LookupSource, Query
from core.interfaces.word_source import WordSource

logger = logging.getLogger(__name__)


class PrimaryDictionarySource(WordSource):
    name = "primary"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._selectors = HtmlSelectors(
            result=self._settings.primary_result_selector,
            container=self._settings.primary_container_selector,
            no_results_marker=self._settings.primary_no_results_marker,
        )

    async def fetch(self, query: Query) -> CandidateList:
        params = {self._settings.primary_query_param: query.text}

        async with build_async_client(self._settings, transport=self._transport) as client:
            body = await fetch_body(
                client,
                self._settings.primary_url,
                params=params,
                endpoint=self.name,
                max_bytes=self._settings.max_response_bytes,
            )

        words = parse_candidates(
            body,
            selectors=self._selectors,
            limit=self._settings.max_candidates,
        )
        logger.debug("primary: %d candidates for %r", len(words), query.text)
        return CandidateList(query=query.text, words=words, source=LookupSource.PRIMARY)
