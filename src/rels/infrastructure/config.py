"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    request_timeout: float = 30.0
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()


def app_version() -> str:
    """Installed distribution version, ``0.0.0`` when running from a bare checkout."""
    try:
        return version("rels")
    except PackageNotFoundError:
        return "0.0.0"


def user_agent() -> str:
    return f"rels/{app_version()}"
