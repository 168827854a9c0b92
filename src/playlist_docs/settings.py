from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config.toml")
ENV_PREFIX = "PLAYLIST_DOCS_"


@dataclass(frozen=True, slots=True)
class Settings:
    """Process settings sourced from environment variables."""

    config_path: Path = DEFAULT_CONFIG_PATH
    default_format: str | None = None


def _read_settings() -> Settings:
    config_env = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    format_env = os.getenv(f"{ENV_PREFIX}DEFAULT_FORMAT")
    config_path = Path(config_env) if config_env else DEFAULT_CONFIG_PATH
    default_format = format_env or None
    return Settings(config_path=config_path, default_format=default_format)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return _read_settings()


__all__ = ["DEFAULT_CONFIG_PATH", "ENV_PREFIX", "Settings", "get_settings"]
