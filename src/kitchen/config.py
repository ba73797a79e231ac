"""Application configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable settings for the kitchen CLI."""

    environment: str = "development"
    log_level: str = "WARNING"
    strict_nutrition: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("KITCHEN_ENV", cls.environment),
            log_level=os.getenv("KITCHEN_LOG_LEVEL", cls.log_level).strip().upper(),
            strict_nutrition=_env_bool("KITCHEN_STRICT_NUTRITION", cls.strict_nutrition),
        )


__all__ = ["AppSettings"]
