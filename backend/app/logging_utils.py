"""Helpers for consistent application logging."""

from __future__ import annotations

import logging
import os
from typing import Final, Optional

LOGGER_NAME: Final[str] = "k8bit_app"
PRIMARY_LEVEL_ENV: Final[str] = "K8BIT_LOG_LEVEL"
FALLBACK_LEVEL_ENV: Final[str] = "LOG_LEVEL"


def parse_log_level(raw: Optional[str]) -> Optional[int]:
    """Return the numeric level named by ``raw``, or None when it names none."""
    candidate = (raw or "").strip()
    if not candidate:
        return None
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    return level if isinstance(level, int) else None


def resolve_log_level() -> int:
    """Return the log level configured via environment variables.

    The same value drives the application logger and uvicorn's own loggers.
    """
    level = parse_log_level(os.getenv(PRIMARY_LEVEL_ENV) or os.getenv(FALLBACK_LEVEL_ENV))
    return logging.INFO if level is None else level


def configure_logging() -> logging.Logger:
    """Ensure application logs flow to stdout with sane defaults."""
    logger = logging.getLogger(LOGGER_NAME)
    level = resolve_log_level()

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(level)

    logger.setLevel(level)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Return a configured logger, optionally for a named child."""
    base = configure_logging()
    return base.getChild(child) if child else base
