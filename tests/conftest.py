from __future__ import annotations

import os
import sys
from io import StringIO

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `post_browser/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from post_browser.client import FetchError  # noqa: E402


def _users(n: int = 10) -> list[dict]:
    return [
        {"id": i, "name": f"User {i}", "username": f"user{i}", "email": f"u{i}@example.com"}
        for i in range(1, n + 1)
    ]


def _posts() -> list[dict]:
    posts = [
        {"userId": 1, "id": i, "title": f"Post {i}", "body": f"Body of post {i}"}
        for i in range(1, 8)
    ]
    posts += [
        {"userId": 2, "id": i, "title": f"Post {i}", "body": f"Body of post {i}"}
        for i in range(11, 14)
    ]
    return posts


def _comments() -> list[dict]:
    return [
        {"postId": 3, "id": 1, "email": "a@example.com", "name": "first", "body": "nice post"},
        {"postId": 3, "id": 2, "email": "b@example.com", "name": "second", "body": "agreed"},
        {"postId": 1, "id": 3, "email": "c@example.com", "name": "third", "body": "hello"},
    ]


class FakeSource:
    """In-memory stand-in for PlaceholderClient."""

    def __init__(self, data: dict[str, list[dict]] | None = None, fail: set[str] | None = None):
        self.data = data if data is not None else {
            "users": _users(),
            "posts": _posts(),
            "albums": [{"userId": 1, "id": i} for i in range(1, 4)],
            "todos": [{"userId": 1, "id": i} for i in range(1, 21)],
            "comments": _comments(),
        }
        self.fail = set(fail or ())
        self.calls: list[tuple[str, dict]] = []

    async def fetch_collection(self, kind: str, filters: dict[str, int] | None = None) -> list[dict]:
        self.calls.append((kind, dict(filters or {})))
        if kind in self.fail:
            raise FetchError(f"{kind} unavailable")
        records = self.data.get(kind, [])
        for key, value in (filters or {}).items():
            records = [r for r in records if r.get(key) == value]
        return records


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def make_console():
    from rich.console import Console

    def _make() -> Console:
        return Console(file=StringIO(), width=200, color_system=None, force_terminal=False)

    return _make
