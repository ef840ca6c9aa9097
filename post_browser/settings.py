from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"


class Settings(BaseSettings):
    """Configuration for the post browser.

    Values are loaded from environment variables and `.env`.

    Notes:
    - BROWSER_API_BASE_URL is the only remote location the browser talks to.
    - Logs go to a file; the terminal is reserved for the interactive screens.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Remote API
    BROWSER_API_BASE_URL: str = Field(default=DEFAULT_API_BASE_URL)
    BROWSER_HTTP_TIMEOUT: float = Field(default=10.0)

    # Logging (diagnostic; written to a rotating file)
    BROWSER_LOG_DIR: Path = Field(default=Path("_logs"))
    BROWSER_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days). Old log files are auto-deleted.
    BROWSER_LOG_BACKUP_COUNT: int = Field(default=14)


def load_settings() -> Settings:
    s = Settings()
    s.BROWSER_API_BASE_URL = (s.BROWSER_API_BASE_URL or DEFAULT_API_BASE_URL).rstrip("/")
    return s
