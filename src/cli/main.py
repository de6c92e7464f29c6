"""CLI principal (Typer).

Comandos:
- `lookup`: una consulta, tabla Rich o JSON.
- `interactive`: bucle de consultas sobre `LookupSession` (última consulta gana).
- `doctor`: diagnóstico de configuración y conectividad.

Los errores remotos se muestran con un mensaje genérico; el detalle solo va al
log en modo `--debug`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import candidates_to_json, export_candidates_json
from cli import doctor
from cli.ui_components import RichRenderer, print_banner
from core.config import AppSettings
from core.domain.errors import NetworkError, ParseError, QueryValidationError
from core.domain.language import Language
from core.logging_config import configure_logging
from core.services.lookup_client import LookupClient
from core.services.lookup_session import LookupSession

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Puzzelwoordenboek lookups from the terminal.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_QUIT_COMMANDS = {":q", ":quit", ":exit"}


def _pick_language(nl: bool | None, settings: AppSettings) -> Language:
    return settings.default_language if nl is None else Language.from_bool(nl)


def _load_settings(debug: bool) -> AppSettings:
    settings = AppSettings()
    if debug and not settings.debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(settings)
    return settings


@app.command()
def lookup(
    query: str = typer.Argument(..., help="Partial word, e.g. 'k?t' or 'kat*'."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
    nl: bool | None = typer.Option(None, "--nl/--en", help="Message language (default: settings)."),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging to stderr."),
) -> None:
    """Look up candidate words for a single query."""

    settings = _load_settings(debug)
    lang = _pick_language(nl, settings)
    client = LookupClient.from_settings(settings)

    try:
        candidates = asyncio.run(client.lookup(query))
    except QueryValidationError as exc:
        logger.debug("rejected query %r: %s", query, exc)
        _console.print(f"[red]{lang.invalid_query_message()}[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    except (NetworkError, ParseError) as exc:
        logger.debug("lookup failed for %r: %r", query, exc)
        _console.print(f"[red]{lang.lookup_failed_message()}[/red]")
        raise typer.Exit(code=1)
    except Exception:
        logger.debug("unexpected lookup failure for %r", query, exc_info=True)
        _console.print(f"[red]{lang.lookup_failed_message()}[/red]")
        raise typer.Exit(code=1)

    if output is not None:
        export_candidates_json(candidates=candidates, output_path=output)

    if as_json:
        typer.echo(candidates_to_json(candidates), nl=False)
        return

    RichRenderer(_console, language=lang).show_candidates(candidates)


async def _interactive_loop(session: LookupSession, console: Console) -> None:
    while True:
        try:
            line = await asyncio.to_thread(console.input, "[cyan]> [/cyan]")
        except EOFError:
            break
        command = line.strip().lower()
        if not command or command in _QUIT_COMMANDS:
            break
        session.submit(line)
    await session.wait()
    await session.close()


@app.command()
def interactive(
    nl: bool | None = typer.Option(None, "--nl/--en", help="Message language (default: settings)."),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging to stderr."),
) -> None:
    """Type queries one per line; a newer query supersedes a pending one."""

    settings = _load_settings(debug)
    lang = _pick_language(nl, settings)

    print_banner(_console)
    client = LookupClient.from_settings(settings)
    session = LookupSession(client, RichRenderer(_console, language=lang), language=lang)
    try:
        asyncio.run(_interactive_loop(session, _console))
    except KeyboardInterrupt:
        _console.print()


def run() -> None:
    app()
