"""Extracción de palabras candidatas desde HTML o JSON.

Formatos soportados:
- JSON: `["kater", "katje"]` o `{"words": [...]}` (también `candidates`,
  `results`, `answers`). Los elementos pueden ser strings u objetos con
  `word`/`woord`.
- HTML: texto de cada elemento que casa con el selector CSS de resultados.

Todo lo demás es `ParseError`: preferimos fallar antes que mostrar basura.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import soupsieve
from bs4 import BeautifulSoup

from adapters.http_client import FetchedBody
from core.domain.errors import ParseError

_LIST_KEYS = ("words", "candidates", "results", "answers")
_ITEM_KEYS = ("word", "woord")


@dataclass(frozen=True)
class HtmlSelectors:
    result: str
    container: str
    no_results_marker: str


def clean_word(value: str) -> str:
    return " ".join(value.split())


def _item_to_word(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        for key in _ITEM_KEYS:
            value = item.get(key)
            if isinstance(value, str):
                return value
    raise ParseError(f"unexpected candidate item: {type(item).__name__}")


def parse_json_candidates(payload: Any) -> list[str]:
    if isinstance(payload, dict):
        for key in _LIST_KEYS:
            if key in payload:
                payload = payload[key]
                break
        else:
            raise ParseError("JSON object without a candidate list")
        if payload is None:
            return []

    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON list, got {type(payload).__name__}")

    words = [clean_word(_item_to_word(item)) for item in payload]
    return [w for w in words if w]


def _select(soup: BeautifulSoup, selector: str, *, limit: int = 0) -> list:
    try:
        return soup.select(selector, limit=limit)
    except soupsieve.SelectorSyntaxError as exc:
        raise ParseError(f"invalid CSS selector {selector!r}") from exc


def parse_html_candidates(html: str, selectors: HtmlSelectors) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")

    items = _select(soup, selectors.result)

    words = [clean_word(el.get_text(" ")) for el in items]
    words = [w for w in words if w]
    if words:
        return words

    if _select(soup, selectors.container, limit=1):
        return []

    marker = selectors.no_results_marker.strip().lower()
    if marker and marker in soup.get_text(" ").lower():
        return []

    raise ParseError("HTML page without results container or no-results marker")


def parse_candidates(
    body: FetchedBody,
    *,
    selectors: HtmlSelectors | None = None,
    limit: int | None = None,
) -> list[str]:
    """Decide el formato por `Content-Type` y devuelve la lista ordenada.

    Sin `selectors` solo se acepta JSON (contrato del proxy de caché).
    """

    if body.is_json or selectors is None:
        try:
            payload = json.loads(body.text)
        except (ValueError, RecursionError) as exc:
            raise ParseError("body is not valid JSON", endpoint=body.url) from exc
        words = parse_json_candidates(payload)
    else:
        words = parse_html_candidates(body.text, selectors)

    if limit is not None:
        words = words[:limit]
    return words
