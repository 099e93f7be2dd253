"""
Application settings.

Values come from the environment (prefix ``TEMPERATURE_HEATMAP_``) or a
local ``.env`` file. Chart geometry lives in ``schemas.ChartConfig`` instead,
so the pipeline never depends on process settings.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level settings for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPERATURE_HEATMAP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "temperature-heatmap"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    data_source: str = Field(
        default="temperature_daily.csv",
        description="Path or http(s) URL of the daily temperature table",
    )
    site_dir: str = "site"
    api_port: int = Field(default=8000, ge=1, le=65535)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
