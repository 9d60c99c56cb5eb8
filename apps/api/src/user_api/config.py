"""Configuration management for the Hanacaraka API."""

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# apps/api/src/user_api/config.py -> apps/api and the repository root
_API_DIR = Path(__file__).resolve().parents[2]
_REPO_DIR = Path(__file__).resolve().parents[4]


def _get_env_files() -> tuple[str, ...]:
    """Get the .env files to load, lowest precedence first.

    ``ENV_FILE`` replaces the defaults. Otherwise the repository root .env
    (shared with the ``PORT`` used by local tooling) is read first and
    apps/api/.env overrides it. Missing files are skipped.
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return (env_file,)
    return (str(_REPO_DIR / ".env"), str(_API_DIR / ".env"))


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "hanacaraka"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "info"
    build_commit: str = "latest"

    # API
    api_host: str = "localhost"
    api_port: int = Field(default=8080, validation_alias=AliasChoices("api_port", "port"))

    # Users
    seed_sample_users: bool = True

    # Static files, mounted under /static when the directory exists
    static_dir: str = "static"

    # UI
    ui_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
