"""TUI (Terminal User Interface) module for post_browser.

Provides level-based navigation over users, their posts and post comments.
"""
from .navigator import Level, Navigator
from .router import Router
from .state import Session

# Import screens to register them
from . import screens  # noqa: F401,E402

__all__ = ["Level", "Navigator", "Router", "Session"]
