"""Builders for the health and welcome payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..schemas import HealthStatus, WelcomeInfo
from ..version import get_application_version

WELCOME_MESSAGE = "K8-Bit Test Python App"
WELCOME_DESCRIPTION = "This is a simple Python app for testing K8-Bit ScaleOps integration"


def build_health_status(now: Optional[datetime] = None) -> HealthStatus:
    """Return a fresh health payload stamped with the current UTC time."""
    return HealthStatus(status="healthy", timestamp=now or datetime.now(timezone.utc))


def build_welcome_info() -> WelcomeInfo:
    return WelcomeInfo(
        message=WELCOME_MESSAGE,
        version=get_application_version(),
        description=WELCOME_DESCRIPTION,
    )
