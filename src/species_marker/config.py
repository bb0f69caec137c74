"""
Application settings.

Values come from the environment (``SPECIES_MARKER_*``) or a local ``.env``
file, falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the marker tool."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIES_MARKER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "species-map-marker"
    debug: bool = False

    output_dir: Path = Field(default=Path("files"), description="Where SVGs are written")
    api_base: str = "https://api.phylopic.org"
    image_base: str = "https://images.phylopic.org"
    http_timeout: float = Field(default=30.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
