"""Validación de consultas en el cliente.

Reglas:
- Se normaliza antes de validar: trim, espacios colapsados, minúsculas.
- Caracteres permitidos: letras (incluye acentos: "één", "café"), comodines
  `?` (una letra) y `*` (varias), guion, apóstrofo ("zo'n") y espacio simple.
- Una consulta vacía o más larga que el máximo no se envía nunca.
"""

from __future__ import annotations

from core.domain.errors import QueryValidationError
from core.domain.models import Query

WILDCARDS = frozenset("?*")
# Tope para la entrada cruda: se rechaza antes de normalizar.
_RAW_LENGTH_FACTOR = 4
_EXTRA_ALLOWED = frozenset("-' ") | WILDCARDS


def normalize_query(value: str) -> str:
    return " ".join(value.split()).lower()


def _is_allowed(ch: str) -> bool:
    return ch.isalpha() or ch in _EXTRA_ALLOWED


def validate_query(value: str, *, max_length: int) -> Query:
    """Valida `value` y devuelve un `Query` normalizado.

    Lanza `QueryValidationError` si la consulta no se puede enviar.
    """

    if not isinstance(value, str):
        raise QueryValidationError("query must be a string", query=repr(value))
    if len(value) > max_length * _RAW_LENGTH_FACTOR:
        raise QueryValidationError(
            f"query is longer than {max_length} characters",
            query=value[: max_length * _RAW_LENGTH_FACTOR],
        )

    text = normalize_query(value)
    if not text:
        raise QueryValidationError("query is empty", query=value)
    if len(text) > max_length:
        raise QueryValidationError(
            f"query is longer than {max_length} characters",
            query=value,
        )

    bad = sorted({ch for ch in text if not _is_allowed(ch)})
    if bad:
        raise QueryValidationError(
            f"query contains disallowed characters: {''.join(bad)!r}",
            query=value,
        )
    if all(ch in WILDCARDS or ch in "-' " for ch in text):
        raise QueryValidationError("query needs at least one letter", query=value)

    return Query(raw=value, text=text)
