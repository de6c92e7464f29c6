"""Arranque de puzzelzoeker desde un checkout.

Uso: `python -m main lookup kat` en la raíz del proyecto, sin instalar.
Los paquetes `cli`, `core` y `adapters` viven bajo `src/`, que se añade al
path antes de importar la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
