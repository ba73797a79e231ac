"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from kitchen.config import AppSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings, reading a local ``.env`` first when present."""

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
    return AppSettings.from_env()


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()
