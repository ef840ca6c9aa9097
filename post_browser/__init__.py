"""post_browser: interactive terminal browser for users, posts and comments."""

__version__ = "0.1.0"
