"""Shared runtime settings for CLI/server adapters.

This module owns environment-backed application settings. It is intentionally
separate from ``gts_validator.core.config`` because core config stays minimal and
framework-agnostic.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_verbosity: str
    cors_allow_origins: tuple[str, ...]
    max_documents: int
    url_timeout: int


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_int(name: str, default: int, *, minimum: int = 1) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        parsed = int(val.strip())
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return Settings(
        app_name=os.getenv("APP_NAME", "GTS Validator"),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        cors_allow_origins=origins or ("*",),
        max_documents=_env_int("GTS_VALIDATOR_MAX_DOCUMENTS", 500),
        url_timeout=_env_int("GTS_VALIDATOR_URL_TIMEOUT", 20),
    )


__all__ = ["Settings", "get_settings"]
