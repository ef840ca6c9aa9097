"""Main router and screen registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from ..client import FetchError
from . import components
from .components import make_answer_prompt, render_error
from .navigator import InputError, Level

if TYPE_CHECKING:
    from rich.console import Console

    from .navigator import Navigator

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = (
    "I'm sorry, we were unable to process your request at this time, "
    "please try again later."
)

COMMENT_QUESTIONS = (
    "Enter your email: ",
    "Enter the title of your comment: ",
    "Enter your comment: ",
)


class Router:
    """Main navigation loop with screen dispatch.
    
    Each pass draws the screen registered for the navigator's level, asks
    until the answer is valid, and hands it to the navigator. A fetch that
    fails leaves the level as it was; the failure is shown under the
    redrawn screen.
    """
    
    def __init__(
        self,
        console: Console,
        nav: Navigator,
        ask: Callable[[str], str] | None = None,
        ask_text: Callable[[str], Awaitable[str | None]] | None = None,
    ):
        """Initialize router with dependencies.
        
        Args:
            console: Rich Console for output
            nav: Navigator instance (owns the session)
            ask: Menu prompt; rich Prompt on `console` by default
            ask_text: Async free-text prompt for the comment form, returning
                None when cancelled; questionary by default
        """
        self.console = console
        self.nav = nav
        self.ask = ask or make_answer_prompt(console)
        self.ask_text = ask_text or components.ask_text
        self.notice: str | None = None

    @property
    def session(self):
        return self.nav.session

    async def run(self) -> int:
        """Load the user list, then run the navigation loop until exit.
        
        Returns:
            Process exit status: 0 on a normal exit, 1 if startup failed
        """
        try:
            await self.nav.load_users()
        except FetchError as exc:
            logger.error("Startup fetch failed: %s", exc)
            render_error(self.console, FETCH_FAILED_MESSAGE)
            return 1

        while True:
            level = self.nav.level
            self.session.add_to_history(level.value)
            self.render(level)

            try:
                answer = self._ask_until_valid()
                result = await self._dispatch(answer)
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[dim]👋 Interrupted. Goodbye![/]")
                return 0

            if result == "exit":
                self.console.print("\n[dim]👋 Goodbye![/]")
                return 0

    def render(self, level: Level) -> None:
        """Draw the screen for `level`, then any pending failure notice."""
        screen_fn = SCREENS.get(level)
        if screen_fn is None:
            raise LookupError(f"No screen registered for {level.value!r}")
        screen_fn(self)

        if self.notice:
            render_error(
                self.console,
                self.notice,
                action="Enter the same choice again to retry.",
            )
            self.notice = None

    def _ask_until_valid(self) -> str:
        message = self.nav.prompt()
        while True:
            raw = self.ask(message)
            try:
                return self.nav.validate(raw)
            except InputError as exc:
                self.console.print(f"[yellow]{exc}[/yellow]")

    async def _dispatch(self, answer: str) -> str | None:
        try:
            result = await self.nav.handle(answer)
        except FetchError as exc:
            logger.error("Fetch failed at %s for answer %r: %s", self.nav.level.value, answer, exc)
            self.notice = FETCH_FAILED_MESSAGE
            return None

        if result == "comment":
            await self._leave_comment()
        return result

    async def _leave_comment(self) -> None:
        answers = []
        for question in COMMENT_QUESTIONS:
            answer = await self.ask_text(question)
            if answer is None:
                self.console.print("[dim]Comment cancelled.[/dim]")
                return
            answers.append(answer)

        email, name, body = answers
        self.nav.add_comment(email=email, name=name, body=body)


# Screen registry - maps levels to render functions
SCREENS: dict[Level, Callable[[Router], None]] = {}


def register_screen(level: Level):
    """Decorator to register a screen function.
    
    Usage:
        @register_screen(Level.USER_LIST)
        def show_user_list(router: Router) -> None:
            ...
    """
    def decorator(fn: Callable[[Router], None]):
        SCREENS[level] = fn
        return fn
    return decorator
