"""Records served by the remote API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class User(_Record):
    id: int
    name: str
    username: str


class Post(_Record):
    id: int
    user_id: int = Field(alias="userId")
    title: str
    body: str


class Comment(_Record):
    """A comment on a post.

    Comments written in the browser are built locally and never sent
    anywhere, so `id` is only unique within the post being viewed.
    """

    post_id: int = Field(alias="postId")
    id: int
    email: str
    name: str
    body: str
