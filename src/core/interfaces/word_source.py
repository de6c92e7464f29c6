"""Contratos de fuentes de palabras y de la superficie de render.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el endpoint primario y el proxy de caché sean intercambiables
  y testeables sin acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CandidateList, Query


@runtime_checkable
class WordSource(Protocol):
    """Contrato mínimo para un endpoint de búsqueda.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP).
    - Devuelve `None` solo si la fuente no tiene respuesta para la consulta
      (p.ej. miss de caché). Una lista vacía es una respuesta válida.
    - Errores: `NetworkError` / `ParseError`.
    """

    name: str

    async def fetch(self, query: Query) -> CandidateList | None:
        """Consulta la fuente y devuelve los candidatos normalizados."""

        ...


@runtime_checkable
class Renderer(Protocol):
    """Superficie que muestra resultados (CLI, UI, tests)."""

    def show_candidates(self, candidates: CandidateList) -> None:
        ...

    def show_error(self, query: str, message: str) -> None:
        """`message` ya es un texto apto para el usuario final."""

        ...
