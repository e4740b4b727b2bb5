"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from kv_facade_core.config.settings import Settings
from kv_facade_core.observability import bind_log_context, clear_log_context, configure_logging
from kv_facade_infra.cache.redis_facade import RedisFacade
from kv_facade_infra.cache.shared import build_redis_facade

app = typer.Typer(
    name="kv-facade",
    help="Fail-soft Redis key-value accessor",
)
console = Console()

_URL_HELP = "Redis URL (overrides KV_REDIS_URL)"


def _prepare(command: str, url: str | None, verbose: bool, **context: object) -> RedisFacade:
    """Load settings, apply CLI overrides, configure logging, build the facade.

    The command name and any extra context (e.g. the key) are bound to every
    log line emitted while the command runs, including store failures.
    """
    settings = Settings()
    if url:
        settings.redis_url = url
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    clear_log_context()
    bind_log_context(command=command, **context)
    return build_redis_facade(settings)


@app.command()
def get(
    key: str = typer.Argument(..., help="Key to read"),
    url: str | None = typer.Option(None, "--url", help=_URL_HELP),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the value stored under KEY, or (nil)."""
    facade = _prepare("get", url, verbose, key=key)
    value = asyncio.run(_get(facade, key))
    if value is None:
        console.print("[dim](nil)[/dim]")
    else:
        console.print(value, markup=False, highlight=False)


@app.command("set")
def set_(
    key: str = typer.Argument(..., help="Key to write"),
    value: str = typer.Argument(..., help="Value to store"),
    ttl: int = typer.Option(..., "--ttl", min=1, help="Expiration in seconds"),
    url: str | None = typer.Option(None, "--url", help=_URL_HELP),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Store VALUE under KEY for --ttl seconds."""
    facade = _prepare("set", url, verbose, key=key)
    asyncio.run(_set(facade, key, value, ttl))
    console.print("OK")


@app.command("del")
def delete(
    key: str = typer.Argument(..., help="Key to delete"),
    url: str | None = typer.Option(None, "--url", help=_URL_HELP),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Delete KEY."""
    facade = _prepare("del", url, verbose, key=key)
    asyncio.run(_delete(facade, key))
    console.print("OK")


@app.command()
def ping(
    url: str | None = typer.Option(None, "--url", help=_URL_HELP),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Check whether Redis is reachable."""
    facade = _prepare("ping", url, verbose)
    alive = asyncio.run(_ping(facade))
    if not alive:
        console.print("[red]Redis unreachable[/red]")
        raise typer.Exit(code=1)
    console.print("[bold green]PONG[/bold green]")


@app.command()
def version() -> None:
    """Show version."""
    console.print("kv-facade v0.1.0")


async def _get(facade: RedisFacade, key: str) -> str | None:
    try:
        return await facade.get(key)
    finally:
        await facade.close()


async def _set(facade: RedisFacade, key: str, value: str, ttl: int) -> None:
    try:
        await facade.set(key, value, ttl)
    finally:
        await facade.close()


async def _delete(facade: RedisFacade, key: str) -> None:
    try:
        await facade.delete(key)
    finally:
        await facade.close()


async def _ping(facade: RedisFacade) -> bool:
    try:
        return await facade.connect(heartbeat=False)
    finally:
        await facade.close()


if __name__ == "__main__":
    app()
