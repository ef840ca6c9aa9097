"""User list screen."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ..components import render_breadcrumbs
from ..navigator import Level
from ..router import register_screen

if TYPE_CHECKING:
    from ...models import User
    from ..router import Router


def build_user_table(users: list[User]) -> Table:
    table = Table()
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Username", style="magenta")

    for position, user in enumerate(users, start=1):
        table.add_row(str(position), escape(user.name), escape(user.username))
    return table


@register_screen(Level.USER_LIST)
def show_user_list(router: Router) -> None:
    """List every loaded user, numbered from 1."""
    router.console.clear()
    render_breadcrumbs(router)

    router.console.print("Below is a list of all users:")
    router.console.print(build_user_table(router.session.users))
    router.console.print()
