from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from .client import FetchError, PlaceholderClient
from .logging import setup_logging
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="post_browser: browse users, their posts and post comments",
    rich_markup_mode="rich",
)
console = Console()


def _configure(base_url: Optional[str], log_level: Optional[str]) -> Settings:
    settings = load_settings()
    if base_url:
        settings.BROWSER_API_BASE_URL = base_url.rstrip("/")
    if log_level:
        settings.BROWSER_LOG_LEVEL = log_level
    setup_logging(settings)
    return settings


async def _browse(settings: Settings) -> int:
    from .tui.navigator import Navigator
    from .tui.router import Router

    async with PlaceholderClient(
        settings.BROWSER_API_BASE_URL,
        timeout=settings.BROWSER_HTTP_TIMEOUT,
    ) as client:
        router = Router(
            console=console,
            nav=Navigator(client),
        )
        return await router.run()


def _interactive_browser(settings: Settings) -> None:
    """Run the browser; exits non-zero only if the user list can't load."""
    logger.info("Starting browser against %s", settings.BROWSER_API_BASE_URL)
    try:
        code = asyncio.run(_browse(settings))
    except KeyboardInterrupt:
        console.print("\n[dim]👋 Interrupted. Goodbye![/]")
        code = 0
    if code:
        raise typer.Exit(code=code)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL (overrides BROWSER_API_BASE_URL)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for the log file"),
):
    """
    [bold]post_browser[/bold]: drill down from users to posts to comments.
    
    [dim]Run without arguments to launch the interactive browser.[/dim]
    
    [bold]Examples:[/bold]
      python -m post_browser                      # Browse
      python -m post_browser users                # Print the user list
      python -m post_browser --base-url URL       # Use another API
    """
    ctx.obj = {"base_url": base_url, "log_level": log_level}
    if ctx.invoked_subcommand is None:
        _interactive_browser(_configure(base_url, log_level))


@app.command("browse", help="[bold cyan]B[/bold cyan]rowse users, posts and comments")
def browse(ctx: typer.Context) -> None:
    opts = ctx.obj or {}
    _interactive_browser(_configure(opts.get("base_url"), opts.get("log_level")))


@app.command("users", help="[bold cyan]U[/bold cyan]sers: print the user list and exit")
def users(ctx: typer.Context) -> None:
    from .models import User
    from .tui.router import FETCH_FAILED_MESSAGE
    from .tui.screens.users import build_user_table

    opts = ctx.obj or {}
    settings = _configure(opts.get("base_url"), opts.get("log_level"))

    async def _fetch() -> list[dict]:
        async with PlaceholderClient(
            settings.BROWSER_API_BASE_URL,
            timeout=settings.BROWSER_HTTP_TIMEOUT,
        ) as client:
            return await client.fetch_collection("users")

    try:
        records = asyncio.run(_fetch())
        rows = [User.model_validate(r) for r in records]
    except (FetchError, ValueError) as exc:
        logger.error("Listing users failed: %s", exc)
        console.print(f"[red]{FETCH_FAILED_MESSAGE}[/red]")
        raise typer.Exit(code=1)

    console.print(build_user_table(rows))


def main():
    app()
