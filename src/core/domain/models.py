"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Facilita la serialización (JSON export) de resultados.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LookupSource(str, Enum):
    """Endpoint que produjo una lista de candidatos."""

    PRIMARY = "primary"
    CACHE = "cache"


class Query(BaseModel):
    """Consulta de un usuario, ya validada.

    Ciclo de vida: se crea en cada pulsación, se consume en la petición y se
    descarta con la siguiente. No tiene identidad persistente.
    """

    model_config = ConfigDict(frozen=True)

    raw: str = Field(
        ...,
        description="Texto tal y como lo escribió el usuario.",
    )
    text: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Texto normalizado (trim, minúsculas, espacios colapsados).",
    )


class CandidateList(BaseModel):
    """Lista ordenada de palabras candidatas para una consulta.

    Vacía significa "el servicio no encontró coincidencias", no un error.
    """

    query: str = Field(
        ...,
        min_length=1,
        description="Texto normalizado de la consulta que responde esta lista.",
    )
    words: list[str] = Field(
        default_factory=list,
        description="Palabras candidatas en el orden devuelto por el servicio.",
    )
    source: LookupSource = Field(
        default=LookupSource.PRIMARY,
        description="Endpoint que respondió (primario o caché).",
    )
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de la respuesta (UTC).",
    )

    @property
    def is_empty(self) -> bool:
        return not self.words

    def __len__(self) -> int:
        return len(self.words)
