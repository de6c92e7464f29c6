"""Arranque de puzzelzoeker con `src/` como directorio de trabajo.

Equivale al script `puzzelzoeker` declarado en pyproject.
"""

from __future__ import annotations

import sys

# Consolas de Windows (cp1252) no pueden imprimir "één" sin esto.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
