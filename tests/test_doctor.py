import asyncio

import httpx
from typer.testing import CliRunner

from cli import doctor
from core.config import get_user_env_file

runner = CliRunner()


def test_check_http_ok(settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    ok, detail = asyncio.run(doctor._check_http(settings.primary_url, settings=settings, transport=transport))
    assert ok
    assert detail == "HTTP 200"


def test_check_http_unreachable_hides_detail(settings):
    def handler(request):
        raise httpx.ConnectError("[Errno 111] Connection refused at 10.1.2.3", request=request)

    ok, detail = asyncio.run(
        doctor._check_http(settings.primary_url, settings=settings, transport=httpx.MockTransport(handler))
    )
    assert not ok
    assert detail == "ConnectError"


def test_doctor_table_with_cache(cached_settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    table, ok = doctor.build_doctor_table(cached_settings, transport=transport)

    assert ok
    checks = list(table.columns[0].cells)
    assert "Primary connectivity" in checks
    assert "Cache connectivity" in checks


def test_doctor_table_primary_down(settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    table, ok = doctor.build_doctor_table(settings, transport=transport)

    assert not ok
    assert "Cache connectivity" not in list(table.columns[0].cells)


def test_setup_writes_user_env():
    result = runner.invoke(
        doctor.app,
        ["setup"],
        input="https://woorden.test/zoeken\nwoord\nhttps://cache.test/lookup\n",
    )

    assert result.exit_code == 0, result.output
    text = get_user_env_file().read_text(encoding="utf-8")
    assert "PUZZELZOEKER_PRIMARY_URL=https://woorden.test/zoeken" in text
    assert "PUZZELZOEKER_PRIMARY_QUERY_PARAM=woord" in text
    assert "PUZZELZOEKER_CACHE_URL=https://cache.test/lookup" in text


def test_setup_rejects_bad_url():
    result = runner.invoke(doctor.app, ["setup"], input="ftp://woorden.test\nq\n\n")

    assert result.exit_code != 0
