"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. GALFIN_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - production

Uses pydantic-settings for type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from galfin.domain.analytics.date_range import DateRangeType


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. GALFIN_ENV_FILE env var
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("GALFIN_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from GALFIN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GALFIN_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Galfin"

    # Logging
    log_level: str = "INFO"

    # Budgeting defaults
    default_currency: str = "EUR"
    default_date_range: DateRangeType = DateRangeType.MTD

    # Data files used by the CLI when no path is passed
    transactions_file: Path = Path("data/transactions.json")
    budget_file: Path = Path("data/budget.json")

    @field_validator("default_currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v: Any) -> str:
        return str(v).strip().upper()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> str:
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
