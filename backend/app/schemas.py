"""Pydantic schemas that describe the API responses."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(BaseModel):
    """Liveness payload returned by ``/health``."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["healthy"] = "healthy"
    timestamp: datetime


class WelcomeInfo(BaseModel):
    """Static greeting served from the root path."""

    model_config = ConfigDict(extra="forbid")

    message: str
    version: str
    description: str


class MemoryUsage(BaseModel):
    """Point-in-time memory counters for the server process."""

    model_config = ConfigDict(extra="forbid")

    rss: int = Field(ge=0, description="Resident set size in bytes.")
    vms: int = Field(ge=0, description="Virtual memory size in bytes.")
    percent: float = Field(ge=0, description="Resident share of total system memory.")


class RuntimeInfo(BaseModel):
    """Interpreter and process details exposed by ``/api/info``."""

    model_config = ConfigDict(extra="forbid")

    app: str
    runtime: str
    version: str
    platform: str
    uptime: float = Field(ge=0, description="Seconds since the process started.")
    memory: MemoryUsage
