"""Entrypoint for `python -m post_browser`."""

from .cli import main


if __name__ == "__main__":
    main()
