"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `RichRenderer` es la superficie de render de `LookupSession`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import CandidateList, LookupSource


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("puzzelzoeker", style="bold cyan")
    subtitle = Text("Puzzelwoordenboek • ? = één letter • * = meerdere letters", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_candidates_table(candidates: CandidateList) -> Table:
    """Tabla Rich con las palabras candidatas (en el orden recibido)."""

    table = Table(title=f"'{candidates.query}' ({len(candidates.words)})")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Woord", style="bold white")
    table.add_column("Letters", style="cyan", justify="right")
    for idx, word in enumerate(candidates.words, start=1):
        table.add_row(str(idx), word, str(len(word.replace(" ", ""))))
    return table


class RichRenderer:
    """Implementa `core.interfaces.word_source.Renderer` sobre una consola Rich."""

    def __init__(self, console: Console, *, language: Language = Language.DUTCH) -> None:
        self._console = console
        self._language = language

    def show_candidates(self, candidates: CandidateList) -> None:
        if candidates.is_empty:
            self._console.print(f"[yellow]{self._language.no_results_message()}[/yellow]")
            return
        self._console.print(build_candidates_table(candidates))
        if candidates.source is LookupSource.CACHE:
            self._console.print("[dim](cache)[/dim]")

    def show_error(self, query: str, message: str) -> None:
        self._console.print(f"[red]{message}[/red]")
