"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. ALGOAN_BRIDGE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. ALGOAN_BRIDGE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("ALGOAN_BRIDGE_ENV_FILE")
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
    """Connector configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Algoan Bridge Connector"

    # Algoan (ALGOAN_ prefix)
    algoan_base_url: str = "http://localhost:4000"
    algoan_client_id: str = ""
    algoan_client_secret: SecretStr = SecretStr("")
    algoan_webhook_target: str = "http://localhost:8080/hooks"
    algoan_webhook_secret: SecretStr = SecretStr("")
    algoan_event_list: str = "bankreader_link_required,bankreader_required"

    @field_validator("algoan_event_list", mode="before")
    @classmethod
    def _validate_event_list(cls, v: Any) -> str:
        """Ensure the event list is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # Bridge (BRIDGE_ prefix)
    bridge_base_url: str = "https://sync.bankin.com"
    bridge_version: str = "2019-02-18"
    bridge_client_id: str = ""
    bridge_client_secret: SecretStr = SecretStr("")
    bridge_user_password_salt: SecretStr = SecretStr("")
    bridge_user_email_domain: str = "algoan-bridge.com"
    bridge_country: str = "fr"

    # Outbound HTTP
    http_timeout: float = 30.0

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_debug: bool = False

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def event_names(self) -> list[str]:
        """Parse subscribed event names from comma-separated string."""
        return [e.strip() for e in self.algoan_event_list.split(",") if e.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
