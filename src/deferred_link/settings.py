"""Runtime settings loaded from environment variables via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from deferred_link.tracking import DEFAULT_TRACKING_BASE_URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEFERRED_LINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tracking_base_url: str = DEFAULT_TRACKING_BASE_URL
    # Empty keeps logs on the console only
    log_dir: str = ""
    http_timeout: float = 30.0
    proxy_url: str = ""
