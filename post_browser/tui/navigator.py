"""Navigation state machine for the users > posts > comments hierarchy."""
from __future__ import annotations

import asyncio
import logging
import re
from enum import Enum
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from ..client import FetchError
from ..models import Comment, Post, User
from .state import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Level(str, Enum):
    USER_LIST = "user_list"
    USER_DETAIL = "user_detail"
    POST_DETAIL = "post_detail"


EXIT = "e"
BACK = "b"
COMMENT = "c"

PROMPTS = {
    Level.USER_LIST: "Enter an ID to see user information or 'e' to exit",
    Level.USER_DETAIL: "Enter an ID to see post information, 'b' to go back, or 'e' to exit",
    Level.POST_DETAIL: "Enter 'c' to leave a comment, 'b' to go back, or 'e' to exit",
}

# Highest ID a numeric answer may pick on each level
SELECTION_LIMITS = {
    Level.USER_LIST: 10,
    Level.USER_DETAIL: 5,
    Level.POST_DETAIL: 5,
}

# Posts listed on the user detail screen
POSTS_SHOWN = 5

INVALID_INPUT_MESSAGE = "Please enter a valid input."
NOTHING_TO_SELECT_MESSAGE = "There is nothing to select here."

_NUMBER = re.compile(r"[0-9]+")


class InputError(ValueError):
    """An answer that is not acceptable on the current level.

    The message is meant for the person at the keyboard.
    """


class DataSource(Protocol):
    async def fetch_collection(
        self,
        kind: str,
        filters: dict[str, int] | None = None,
    ) -> list[dict[str, Any]]:
        ...


def validate_input(raw: str | None, level: Level, available: int | None = None) -> str:
    """Check an answer against the rules of `level`.

    Args:
        raw: Text as typed
        level: Level the answer was given on
        available: Rows actually selectable on screen; narrows the numeric
            range when fewer than the level's limit are shown

    Returns:
        The normalized answer (stripped, lower-case)

    Raises:
        InputError: With the corrective message to show
    """
    answer = (raw or "").strip().lower()

    if level is Level.POST_DETAIL:
        if answer not in (COMMENT, BACK, EXIT):
            raise InputError(INVALID_INPUT_MESSAGE)
        return answer

    if answer in (BACK, EXIT):
        return answer
    if not _NUMBER.fullmatch(answer):
        raise InputError(INVALID_INPUT_MESSAGE)

    limit = SELECTION_LIMITS[level]
    if available is not None:
        if available <= 0:
            raise InputError(NOTHING_TO_SELECT_MESSAGE)
        limit = min(limit, available)

    if not 1 <= int(answer) <= limit:
        raise InputError(f"Please enter a number between 1 and {limit}.")
    return answer


def _parse(model: type[ModelT], records: list[dict[str, Any]], kind: str) -> list[ModelT]:
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as exc:
        raise FetchError(f"/{kind} returned malformed records: {exc}") from exc


class Navigator:
    """Level-based navigation over the session.

    Owns the Session and the current level:
    - A number opens the user/post at that position (fetch first, then select)
    - `b` goes back to the user list
    - `c` on a post starts a comment
    - `e` exits from anywhere

    Nothing changes unless every fetch for the move succeeds.
    """

    LEVEL_LABELS = {
        Level.USER_LIST: "Users",
        Level.USER_DETAIL: "User",
        Level.POST_DETAIL: "Post",
    }

    def __init__(self, source: DataSource, session: Session | None = None):
        """Initialize at the user list.

        Args:
            source: Anything with an async `fetch_collection`
            session: Session to drive; a fresh one by default
        """
        self.source = source
        self.session = session if session is not None else Session()
        self.level = Level.USER_LIST

    def available(self) -> int:
        """Number of rows a numeric answer can pick on the current level."""
        if self.level is Level.USER_LIST:
            return len(self.session.users)
        if self.level is Level.USER_DETAIL:
            return min(POSTS_SHOWN, len(self.session.user_posts))
        return 0

    def prompt(self) -> str:
        return PROMPTS[self.level]

    def validate(self, raw: str | None) -> str:
        return validate_input(raw, self.level, self.available())

    async def load_users(self) -> list[User]:
        """Fetch the user list and start over at it.

        Raises:
            FetchError: The list could not be loaded
        """
        records = await self.source.fetch_collection("users")
        users = _parse(User, records, "users")
        self.session.users = users
        self.session.clear_selection()
        self.level = Level.USER_LIST
        logger.info("Loaded %d users", len(users))
        return users

    async def handle(self, answer: str) -> str:
        """Apply a validated answer.

        Args:
            answer: Output of `validate`

        Returns:
            "exit", "comment", or the value of the level now current

        Raises:
            FetchError: Data for the requested screen could not be loaded;
                level and session are unchanged
        """
        if answer == EXIT:
            return "exit"
        if answer == BACK:
            self.back()
            return self.level.value
        if answer == COMMENT and self.level is Level.POST_DETAIL:
            return "comment"

        index = int(answer) - 1
        if self.level is Level.USER_LIST:
            await self.open_user(index)
        elif self.level is Level.USER_DETAIL:
            await self.open_post(index)
        return self.level.value

    async def open_user(self, index: int) -> None:
        """Load posts, albums and todos for `users[index]` and show the user."""
        user = self.session.users[index]
        scope = {"userId": user.id}

        results = await asyncio.gather(
            self.source.fetch_collection("posts", scope),
            self.source.fetch_collection("albums", scope),
            self.source.fetch_collection("todos", scope),
            return_exceptions=True,
        )
        failures = []
        for result in results:
            if isinstance(result, FetchError):
                failures.append(result)
            elif isinstance(result, BaseException):
                raise result
        if failures:
            for failure in failures:
                logger.error("Loading user %d failed: %s", user.id, failure)
            raise FetchError(f"Could not load data for user {user.id}") from failures[0]

        posts_records, albums, todos = results
        posts = _parse(Post, posts_records, "posts")
        self.session.select_user(user, posts, album_count=len(albums), todo_count=len(todos))
        self.level = Level.USER_DETAIL
        logger.info(
            "Opened user %d (%d posts, %d albums, %d todos)",
            user.id,
            len(posts),
            len(albums),
            len(todos),
        )

    async def open_post(self, index: int) -> None:
        """Load comments for `user_posts[index]` and show the post."""
        post = self.session.user_posts[index]
        records = await self.source.fetch_collection("comments", {"postId": post.id})
        comments = _parse(Comment, records, "comments")
        self.session.select_post(post, comments)
        self.level = Level.POST_DETAIL
        logger.info("Opened post %d (%d comments)", post.id, len(comments))

    def back(self) -> None:
        """Return to the user list; the list itself is kept, no fetch."""
        self.session.clear_selection()
        self.level = Level.USER_LIST

    def add_comment(self, email: str, name: str, body: str) -> Comment:
        """Append a local comment to the post being viewed.

        Raises:
            RuntimeError: If not on a post
        """
        if self.level is not Level.POST_DETAIL:
            raise RuntimeError("Comments can only be added while viewing a post")
        comment = self.session.append_comment(email=email, name=name, body=body)
        logger.info("Added local comment %d to post %d", comment.id, comment.post_id)
        return comment

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "Users > Leanne Graham > sunt aut facere"
        """
        session = self.session
        labels = [self.LEVEL_LABELS[Level.USER_LIST]]
        if self.level in (Level.USER_DETAIL, Level.POST_DETAIL):
            user = session.selected_user
            labels.append(user.name if user else self.LEVEL_LABELS[Level.USER_DETAIL])
        if self.level is Level.POST_DETAIL:
            post = session.selected_post
            labels.append(post.title if post else self.LEVEL_LABELS[Level.POST_DETAIL])
        return " > ".join(labels)
