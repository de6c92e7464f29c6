from __future__ import annotations

import logging
import os
from collections.abc import Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.language import Language

PRIMARY_URL = "https://woorden.test/zoeken"
CACHE_URL = "https://cache.test/lookup"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # Config de usuario en tmp y sin variables PUZZELZOEKER_ heredadas.
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    for key in list(os.environ):
        if key.upper().startswith("PUZZELZOEKER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        primary_url=PRIMARY_URL,
        cache_url=None,
        debounce_seconds=0,
        default_language=Language.ENGLISH,
    )


@pytest.fixture
def cached_settings(settings: AppSettings) -> AppSettings:
    return settings.model_copy(update={"cache_url": CACHE_URL})


class Recorder:
    """Handler de `httpx.MockTransport` que guarda cada request."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder() -> Callable[[Callable[[httpx.Request], httpx.Response]], Recorder]:
    return Recorder


@pytest.fixture(autouse=True)
def _reset_app_loggers():
    yield
    # `configure_logging` (CLI) deja handlers apuntando al stderr de CliRunner.
    for name in ("core", "adapters", "cli"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
