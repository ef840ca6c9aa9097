"""Session state for the records currently on screen."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models import Comment, Post, User

logger = logging.getLogger(__name__)

# Screen visits kept in memory
HISTORY_LIMIT = 50


@dataclass
class Session:
    """Browsing session - what is selected and the data loaded for it.

    One Session exists per run. Dependent fields (posts, counts, comments)
    are only ever written together with the selection they belong to.
    """

    users: list[User] = field(default_factory=list)

    selected_user: User | None = None
    user_posts: list[Post] = field(default_factory=list)
    user_album_count: int = 0
    user_todo_count: int = 0

    selected_post: Post | None = None
    post_comments: list[Comment] = field(default_factory=list)

    # Most recent screen visits, oldest first
    history: list[str] = field(default_factory=list)

    def select_user(
        self,
        user: User,
        posts: list[Post],
        album_count: int,
        todo_count: int,
    ) -> None:
        """Replace the selected user and everything loaded for them."""
        self.selected_user = user
        self.user_posts = list(posts)
        self.user_album_count = album_count
        self.user_todo_count = todo_count
        self.clear_post()

    def select_post(self, post: Post, comments: list[Comment]) -> None:
        """Replace the selected post and its comments.

        Raises:
            ValueError: If the post is not one of the selected user's posts
        """
        if post not in self.user_posts:
            raise ValueError(f"Post {post.id} does not belong to the selected user")
        self.selected_post = post
        self.post_comments = list(comments)

    def clear_post(self) -> None:
        self.selected_post = None
        self.post_comments = []

    def clear_selection(self) -> None:
        """Drop the selected user and post (back to the user list)."""
        self.selected_user = None
        self.user_posts = []
        self.user_album_count = 0
        self.user_todo_count = 0
        self.clear_post()

    def append_comment(self, email: str, name: str, body: str) -> Comment:
        """Add a locally written comment to the selected post.

        Returns:
            The new comment, numbered after the ones already shown

        Raises:
            RuntimeError: If no post is selected
        """
        if self.selected_post is None:
            raise RuntimeError("No post selected")
        comment = Comment(
            post_id=self.selected_post.id,
            id=len(self.post_comments) + 1,
            email=email,
            name=name,
            body=body,
        )
        self.post_comments.append(comment)
        return comment

    def add_to_history(self, screen: str) -> None:
        """Record screen visit in session history.

        Args:
            screen: Screen identifier that was visited
        """
        self.history.append(screen)
        del self.history[:-HISTORY_LIMIT]
        logger.debug("Screen visit: %s", screen)
