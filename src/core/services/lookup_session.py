"""Secuencia de consultas con "última consulta gana".

Por qué existe:
- La UI lanza una consulta por pulsación. Sin coordinación, una respuesta lenta
  de "kat" podría pintarse encima de la de "kater".
- `LookupSession` es el único dueño del estado visible (consulta actual y
  resultados) y solo lo actualiza a través del ciclo petición/respuesta.

Mecánica:
- Cada `submit` incrementa una generación y cancela la tarea en vuelo.
- La tarea nueva espera `debounce_seconds` antes de hacer I/O; si llega otra
  pulsación durante la espera, no se hace ninguna petición.
- Al llegar la respuesta solo se entrega al `Renderer` si su generación sigue
  siendo la actual (cubre cancelaciones que llegan tarde).
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.errors import NetworkError, ParseError, QueryValidationError
from core.domain.language import Language
from core.domain.models import CandidateList, Query
from core.domain.query import normalize_query
from core.interfaces.word_source import Renderer
from core.services.lookup_client import LookupClient

logger = logging.getLogger(__name__)


class LookupSession:
    def __init__(
        self,
        client: LookupClient,
        renderer: Renderer,
        *,
        language: Language | None = None,
        debounce_seconds: float | None = None,
    ) -> None:
        self._client = client
        self._renderer = renderer
        self._language = language or client.settings.default_language
        self._debounce = (
            client.settings.debounce_seconds if debounce_seconds is None else debounce_seconds
        )

        self._generation = 0
        self._query: str | None = None
        self._results: CandidateList | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def current_query(self) -> str | None:
        return self._query

    @property
    def results(self) -> CandidateList | None:
        """Último resultado entregado para la consulta actual (o `None`)."""

        return self._results

    @property
    def generation(self) -> int:
        return self._generation

    def submit(self, query: str) -> asyncio.Task[None] | None:
        """Registra una nueva consulta; requiere un event loop en marcha.

        Devuelve la tarea lanzada, o `None` si no hay nada que pedir (consulta
        vacía o inválida).
        """

        self._generation += 1
        generation = self._generation
        self._cancel_inflight()
        self._query = query
        self._results = None

        if not normalize_query(query):
            return None

        try:
            parsed = self._client.validate(query)
        except QueryValidationError as exc:
            logger.debug("rejected query %r: %s", query, exc)
            self._renderer.show_error(query, self._language.invalid_query_message())
            return None

        self._task = asyncio.create_task(self._run(parsed, generation))
        return self._task

    async def wait(self) -> None:
        """Espera a que termine (o se cancele) la consulta en vuelo."""

        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def close(self) -> None:
        self._generation += 1
        task = self._cancel_inflight()
        if task is not None:
            await asyncio.wait({task})

    def _cancel_inflight(self) -> asyncio.Task[None] | None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            return task
        return None

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _run(self, query: Query, generation: int) -> None:
        if self._debounce > 0:
            await asyncio.sleep(self._debounce)

        try:
            result = await self._client.lookup(query)
        except (NetworkError, ParseError) as exc:
            if not self._is_current(generation):
                return
            logger.debug("lookup failed for %r: %r", query.text, exc)
            self._renderer.show_error(query.raw, self._language.lookup_failed_message())
            return
        except Exception:
            if not self._is_current(generation):
                return
            logger.warning("unexpected lookup failure for %r", query.text)
            logger.debug("unexpected lookup failure detail", exc_info=True)
            self._renderer.show_error(query.raw, self._language.lookup_failed_message())
            return

        if not self._is_current(generation):
            logger.debug("discarding stale result for %r", query.text)
            return

        self._results = result
        self._renderer.show_candidates(result)
