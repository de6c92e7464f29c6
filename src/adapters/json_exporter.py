"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con otras herramientas (scripts, editores de puzzels).
- Permite guardar una búsqueda sin depender del render de consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import CandidateList


def candidates_to_json(candidates: CandidateList) -> str:
    payload = candidates.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_candidates_json(*, candidates: CandidateList, output_path: Path) -> Path:
    """Exporta `CandidateList` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(candidates_to_json(candidates), encoding="utf-8")
    return output_path
