"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(
    url: str,
    *,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url)
        return response.status_code < 500, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        detail = str(exc) if settings.debug else exc.__class__.__name__
        return False, detail


def build_doctor_table(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[Table, bool]:
    """Build the diagnostics table; the flag is False when a required check failed."""

    table = Table(title="puzzelzoeker doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Primary URL", "OK", settings.primary_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Max query length", "OK", str(settings.max_query_length))
    if settings.cache_url:
        table.add_row("Cache URL", "OK", settings.cache_url)
    else:
        table.add_row("Cache URL", "OPTIONAL", "Not set -> every lookup hits the primary endpoint")
    if settings.debug:
        table.add_row("Debug", "WARN", "Verbose logging enabled; disable in production")

    # Connectivity (best-effort)
    ok_primary, detail_primary = asyncio.run(
        _check_http(settings.primary_url, settings=settings, transport=transport)
    )
    table.add_row("Primary connectivity", "OK" if ok_primary else "FAIL", detail_primary)

    if settings.cache_url:
        ok_cache, detail_cache = asyncio.run(
            _check_http(settings.cache_url, settings=settings, transport=transport)
        )
        table.add_row("Cache connectivity", "OK" if ok_cache else "FAIL", detail_cache)

    return table, ok_primary


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    table, ok = build_doctor_table(settings)
    _console.print(table)

    if not ok:
        _console.print(
            "\n[yellow]Note:[/yellow] Check PUZZELZOEKER_PRIMARY_URL or run `puzzelzoeker doctor setup`."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive endpoint setup (stores config in the user config .env)."""

    current = AppSettings()

    primary_url = typer.prompt("Primary dictionary URL", default=current.primary_url, show_default=True).strip()
    query_param = typer.prompt("Query parameter", default=current.primary_query_param, show_default=True).strip()
    cache_url = typer.prompt(
        "Cache proxy URL (empty = disabled)",
        default=current.cache_url or "",
        show_default=False,
    ).strip()

    if not primary_url.startswith(("http://", "https://")):
        raise typer.BadParameter("primary URL must start with http:// or https://")
    if cache_url and not cache_url.startswith(("http://", "https://")):
        raise typer.BadParameter("cache URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "PUZZELZOEKER_PRIMARY_URL": primary_url,
            "PUZZELZOEKER_PRIMARY_QUERY_PARAM": query_param or None,
            "PUZZELZOEKER_CACHE_URL": cache_url or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")


@app.command(name="where")
def where() -> None:
    """Print the location of the user config .env file."""

    _console.print(str(get_user_env_file()))
