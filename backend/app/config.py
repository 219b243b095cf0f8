"""Runtime configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from .logging_utils import get_logger

DEFAULT_APP_NAME = "k8bit-test-python-app"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

logger = get_logger("config")


@dataclass(frozen=True)
class Settings:
    """Application settings sourced from environment variables."""

    app_name: str
    host: str
    port: int
    cors_allow_origins: tuple[str, ...]

    @classmethod
    def from_env(cls) -> "Settings":
        """Construct settings using environment variables with sane defaults."""
        return cls(
            app_name=os.getenv("APP_NAME", "").strip() or DEFAULT_APP_NAME,
            host=os.getenv("HOST", "").strip() or DEFAULT_HOST,
            port=_load_port(),
            cors_allow_origins=_load_cors_origins(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()


def parse_port(raw: str | None) -> int | None:
    """Return ``raw`` as a TCP port number, or None when it is not one."""
    if raw is None:
        return None
    try:
        port = int(raw.strip())
    except ValueError:
        return None
    if not 1 <= port <= 65535:
        return None
    return port


def _load_port() -> int:
    """Return the listening port from ``PORT``, falling back to the default."""
    raw = os.getenv("PORT")
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    port = parse_port(raw)
    if port is None:
        logger.warning("Ignoring invalid PORT value %r; using %d.", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def _load_cors_origins() -> tuple[str, ...]:
    """Return tuple of allowed CORS origins based on environment variables."""
    raw = os.getenv("API_CORS_ALLOW_ORIGINS")
    if raw:
        return tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    # empty: any origin, without credentials
    return ()
