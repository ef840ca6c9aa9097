"""User detail screen - counts and the first few posts."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ..components import render_breadcrumbs
from ..navigator import POSTS_SHOWN, Level
from ..router import register_screen

if TYPE_CHECKING:
    from ..router import Router


@register_screen(Level.USER_DETAIL)
def show_user_detail(router: Router) -> None:
    """Summary line for the selected user and a table of up to five posts.

    Users with fewer posts get fewer rows.
    """
    session = router.session
    user = session.selected_user
    router.console.clear()
    render_breadcrumbs(router)

    name = escape(user.name) if user else "This user"
    router.console.print(
        f"[bold]{name}[/bold] has {len(session.user_posts)} posts, "
        f"{session.user_album_count} albums, and {session.user_todo_count} todos."
    )

    shown = session.user_posts[:POSTS_SHOWN]
    if not shown:
        router.console.print("[dim]No posts to show.[/dim]\n")
        return

    table = Table()
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Post")
    for position, post in enumerate(shown, start=1):
        table.add_row(str(position), escape(post.title))

    router.console.print(table)
    router.console.print()
