"""File logging for the browser session."""
from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "post_browser.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that chatter at INFO on every request
_QUIET_LOGGERS = ("httpx", "httpcore")


def log_file_path(settings) -> Path:
    """Where the log file goes.

    A relative BROWSER_LOG_DIR is taken relative to the working directory
    the browser was started from, so installed copies never write into
    site-packages.
    """
    log_dir = Path(settings.BROWSER_LOG_DIR).expanduser()
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir
    return log_dir / LOG_FILE_NAME


def setup_logging(settings) -> Path:
    """Send all logging to a daily-rotated file and return its path.

    The terminal belongs to the screens, so nothing is logged to the console.
    Calling this again replaces the previous handlers.
    """
    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    level_name = (settings.BROWSER_LOG_LEVEL or "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = TimedRotatingFileHandler(
        log_file,
        when="midnight",
        backupCount=max(0, settings.BROWSER_LOG_BACKUP_COUNT),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("post_browser").info("Logging to %s at %s", log_file, level_name)
    return log_file
