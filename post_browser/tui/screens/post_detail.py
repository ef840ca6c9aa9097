"""Post detail screen."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from ..components import render_breadcrumbs
from ..navigator import Level
from ..router import register_screen

if TYPE_CHECKING:
    from ..router import Router


@register_screen(Level.POST_DETAIL)
def show_post_detail(router: Router) -> None:
    session = router.session
    post = session.selected_post
    router.console.clear()
    render_breadcrumbs(router)

    title = escape(post.title) if post else ""
    body = escape(post.body) if post else ""
    router.console.print(
        f'Viewing post "[bold]{title}[/bold]" which has {len(session.post_comments)} comments.\n'
    )
    router.console.print(f'Post: "{body}".\n')

    for comment in session.post_comments:
        router.console.print(f"- [cyan]{escape(comment.email)}[/cyan] said {escape(comment.body)}.")
    router.console.print()
