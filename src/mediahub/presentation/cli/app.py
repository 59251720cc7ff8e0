"""MediaHub CLI application using Typer.

Command-line utilities for running the API server and maintaining the
search caches without going through the HTTP admin endpoints.
"""

import asyncio
import secrets

import typer
from rich.console import Console
from rich.table import Table

from mediahub.application.dtos import CacheClearResult
from mediahub.application.services import CacheAdminService, SearchCache
from mediahub.infrastructure.cache import create_cache_store
from mediahub.infrastructure.config import FileConfigProvider
from mediahub_config.settings import get_settings

app = typer.Typer(
    name="mediahub",
    help="MediaHub - aggregated media search service CLI",
    no_args_is_help=True,
)
console = Console()


cache_app = typer.Typer(
    name="cache",
    help="Search cache maintenance",
    no_args_is_help=True,
)
app.add_typer(cache_app)

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "mediahub.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


async def _clear(prefix: str | None, query: str | None) -> CacheClearResult:
    settings = get_settings()
    store = create_cache_store(settings)
    try:
        cache = SearchCache(store)
        if prefix:
            deleted = await cache.clear_prefix(prefix)
            return CacheClearResult(deleted=deleted, prefixes=(prefix,))
        service = CacheAdminService(
            cache,
            FileConfigProvider(settings.resolved_config_file),
        )
        return await service.clear_search(query)
    finally:
        await store.close()


@cache_app.command("clear")
def clear_cache(
    prefix: str = typer.Option(None, "--prefix", help="Delete keys with prefix"),
    query: str = typer.Option(None, "--query", help="Only entries for this query"),
) -> None:
    """Clear Redis search caches (all unless --prefix or --query is given)."""
    if prefix and query:
        console.print("[red]Use either --prefix or --query, not both.[/red]")
        raise typer.Exit(code=1)

    storage_type = get_settings().storage_type
    if storage_type != "redis":
        console.print(
            f"[red]STORAGE_TYPE={storage_type} keeps the search cache inside the "
            "running server; clear it through the admin API instead.[/red]"
        )
        raise typer.Exit(code=1)

    result = asyncio.run(_clear(prefix, query))

    table = Table(title="Cache cleared")
    table.add_column("Prefixes", style="cyan")
    table.add_column("Query")
    table.add_column("Deleted", justify="right", style="green")
    table.add_row(", ".join(result.prefixes), result.query or "-", str(result.deleted))
    console.print(table)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate an owner password for the MediaHub configuration.

    The owner password also signs the session cookies, so it should be
    long and random. Copy the output to your .env file.
    """
    console.print("\n[bold green]MediaHub Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print("\nGenerated values for your [bold].env[/bold] file:\n")

    console.print(f"[cyan]ADMIN_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Changing ADMIN_PASSWORD invalidates every issued session "
        "cookie.[/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
