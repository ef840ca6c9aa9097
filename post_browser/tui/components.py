"""Reusable UI components for the TUI."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

if TYPE_CHECKING:
    from rich.console import Console

    from .router import Router


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#00b4d8 bold"),         # Cyan accent
    ("question", "bold"),
    ("answer", "fg:#90e0ef bold"),         # Light cyan for answers
])


# ═══════════════════════════════════════════════════════════════════════════════
# PROMPTS
# ═══════════════════════════════════════════════════════════════════════════════

def make_answer_prompt(console: Console):
    """Build the menu prompt used by the router.

    Returns:
        Callable taking the prompt message and returning the raw answer
    """
    def ask(message: str) -> str:
        return Prompt.ask(message, console=console, default="", show_default=False)

    return ask


async def ask_text(message: str) -> str | None:
    """Free-text question, asked on the running event loop.

    Returns:
        The answer (possibly empty), or None if the user pressed Ctrl+C
    """
    return await questionary.text(message, style=BRAND_STYLE, qmark="").ask_async(
        kbi_msg="",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# RENDERING HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def render_breadcrumbs(router: Router) -> None:
    """Render navigation breadcrumbs.
    
    Args:
        router: Router instance with navigator
    """
    breadcrumbs = escape(router.nav.breadcrumbs())
    router.console.print(f"[dim]{breadcrumbs}[/dim]\n")


def render_error(
    console: Console,
    title: str,
    cause: str | None = None,
    action: str | None = None,
) -> None:
    """Render a friendly error panel.
    
    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = f"[bold red]✗ {escape(title)}[/bold red]"

    if cause:
        content += f"\n\n[yellow]Cause:[/yellow] {escape(cause)}"
    if action:
        content += f"\n\n[dim]→ {escape(action)}[/dim]"
    
    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
