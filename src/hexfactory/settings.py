"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulationSettings(BaseSettings):
    """Centralized settings for the hex factory simulator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HEXFACTORY_",
        extra="ignore",
    )

    cell_radius: float = Field(default=1.0, gt=0)
    tick_interval: float = Field(default=2.0, gt=0)
    recipes_file: Path | None = None
    seed_demo_layout: bool = False
    api_host: str = "0.0.0.0"  # noqa: S104
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=list)


@cache
def get_settings() -> SimulationSettings:
    """Return the cached settings instance."""

    return SimulationSettings()


__all__ = ["SimulationSettings", "get_settings"]
