import asyncio

import pytest

from core.domain.errors import NetworkError
from core.domain.language import Language
from core.domain.models import CandidateList, Query
from core.services.lookup_client import LookupClient
from core.services.lookup_session import LookupSession


class ListRenderer:
    def __init__(self):
        self.rendered: list[CandidateList] = []
        self.errors: list[tuple[str, str]] = []

    def show_candidates(self, candidates):
        self.rendered.append(candidates)

    def show_error(self, query, message):
        self.errors.append((query, message))


class GatedSource:
    """Fuente falsa: cada consulta espera a que el test abra su `Event`."""

    name = "primary"

    def __init__(self, answers, *, ignore_cancel=False):
        self.answers = answers
        self.gates = {q: asyncio.Event() for q in answers}
        self.calls: list[str] = []
        self.ignore_cancel = ignore_cancel

    async def fetch(self, query: Query) -> CandidateList:
        self.calls.append(query.text)
        gate = self.gates[query.text]
        try:
            await gate.wait()
        except asyncio.CancelledError:
            if not self.ignore_cancel:
                raise
            await gate.wait()
        return CandidateList(query=query.text, words=self.answers[query.text])


class FailingSource:
    name = "primary"

    async def fetch(self, query):
        raise NetworkError("primary answered HTTP 500 at 10.0.0.7", endpoint="primary", status_code=500)


class CrashingSource:
    name = "primary"

    async def fetch(self, query):
        raise RuntimeError("unexpected state at 10.0.0.8")


def _session(source, settings, renderer, **kwargs):
    client = LookupClient(source, settings=settings)
    return LookupSession(client, renderer, language=Language.ENGLISH, **kwargs)


@pytest.mark.asyncio
async def test_single_query_renders(settings):
    source = GatedSource({"kat": ["kater", "katje"]})
    source.gates["kat"].set()
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    session.submit("kat")
    await session.wait()

    assert [c.words for c in renderer.rendered] == [["kater", "katje"]]
    assert session.results.words == ["kater", "katje"]
    assert session.current_query == "kat"


@pytest.mark.asyncio
async def test_newer_query_cancels_older(settings):
    source = GatedSource({"cat": ["cater"], "cats": ["catsup"]})
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    first = session.submit("cat")
    await asyncio.sleep(0)
    assert source.calls == ["cat"]

    session.submit("cats")
    source.gates["cats"].set()
    await session.wait()
    source.gates["cat"].set()
    await asyncio.wait({first})

    assert first.cancelled()
    assert [c.query for c in renderer.rendered] == ["cats"]
    assert session.results.query == "cats"


@pytest.mark.asyncio
async def test_stale_response_arriving_late_is_discarded(settings):
    # La fuente ignora la cancelación: "cat" responde después de "cats".
    source = GatedSource({"cat": ["cater"], "cats": ["catsup"]}, ignore_cancel=True)
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    first = session.submit("cat")
    await asyncio.sleep(0)
    second = session.submit("cats")
    source.gates["cats"].set()
    await asyncio.wait({second})
    assert [c.query for c in renderer.rendered] == ["cats"]

    source.gates["cat"].set()
    await asyncio.wait({first})

    assert not first.cancelled()
    assert [c.query for c in renderer.rendered] == ["cats"]
    assert session.results.query == "cats"


@pytest.mark.asyncio
async def test_stale_response_arriving_first_is_discarded(settings):
    source = GatedSource({"cat": ["cater"], "cats": ["catsup"]}, ignore_cancel=True)
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    first = session.submit("cat")
    await asyncio.sleep(0)
    session.submit("cats")
    await asyncio.wait({first})
    assert renderer.rendered == []

    source.gates["cats"].set()
    await session.wait()

    assert [c.query for c in renderer.rendered] == ["cats"]


@pytest.mark.asyncio
async def test_debounce_skips_superseded_requests(settings):
    source = GatedSource({"c": ["x"], "ca": ["y"], "cat": ["cater"]})
    for gate in source.gates.values():
        gate.set()
    renderer = ListRenderer()
    session = _session(source, settings, renderer, debounce_seconds=0.05)

    session.submit("c")
    session.submit("ca")
    session.submit("cat")
    await session.wait()

    assert source.calls == ["cat"]
    assert [c.query for c in renderer.rendered] == ["cat"]


@pytest.mark.asyncio
async def test_invalid_query_renders_error_without_request(settings):
    source = GatedSource({"kat": ["kater"]})
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    assert session.submit("kat1") is None

    assert source.calls == []
    assert renderer.errors == [("kat1", Language.ENGLISH.invalid_query_message())]


@pytest.mark.asyncio
async def test_empty_query_clears_without_rendering(settings):
    source = GatedSource({"kat": ["kater"]})
    source.gates["kat"].set()
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    session.submit("kat")
    await session.wait()
    assert session.submit("   ") is None

    assert session.results is None
    assert len(renderer.rendered) == 1
    assert renderer.errors == []


@pytest.mark.asyncio
async def test_failure_shows_generic_message(settings):
    renderer = ListRenderer()
    session = _session(FailingSource(), settings, renderer)

    session.submit("kat")
    await session.wait()

    assert renderer.rendered == []
    assert renderer.errors == [("kat", Language.ENGLISH.lookup_failed_message())]
    assert "10.0.0.7" not in renderer.errors[0][1]


@pytest.mark.asyncio
async def test_close_cancels_inflight(settings):
    source = GatedSource({"kat": ["kater"]})
    renderer = ListRenderer()
    session = _session(source, settings, renderer)

    task = session.submit("kat")
    await asyncio.sleep(0)
    await session.close()

    assert task.cancelled()
    assert renderer.rendered == []


@pytest.mark.asyncio
async def test_unexpected_failure_shows_generic_message(settings):
    renderer = ListRenderer()
    session = _session(CrashingSource(), settings, renderer)

    task = session.submit("kat")
    await session.wait()

    assert task.done() and task.exception() is None
    assert renderer.rendered == []
    assert renderer.errors == [("kat", Language.ENGLISH.lookup_failed_message())]
    assert "10.0.0.8" not in renderer.errors[0][1]
