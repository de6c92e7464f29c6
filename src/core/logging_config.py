"""Configuración de logging (stdlib).

Reglas:
- Cada módulo usa `logging.getLogger(__name__)`; aquí solo se instala el handler.
- Por defecto WARNING: el detalle de errores remotos va a DEBUG y solo se ve con
  `debug=True` (nunca en una instalación de producción).
"""

from __future__ import annotations

import logging
import sys

from core.config import AppSettings

_APP_LOGGERS = ("core", "adapters", "cli")
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    level = logging.DEBUG if settings.debug else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if settings.debug else _FORMAT))

    for name in _APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    # httpx/httpcore loguean URLs completas en INFO.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if settings.debug else logging.WARNING)
