"""Meta endpoints (health, welcome, runtime info)."""

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..dependencies import get_runtime_probe
from ..schemas import HealthStatus, RuntimeInfo, WelcomeInfo
from ..services.runtime import RuntimeProbe
from ..services.status import build_health_status, build_welcome_info

router = APIRouter(tags=["meta"])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthStatus,
    summary="Liveness check for orchestrator probes.",
)
async def health_check() -> HealthStatus:
    return build_health_status()


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_model=WelcomeInfo,
    summary="Static welcome message with the application version.",
)
async def welcome() -> WelcomeInfo:
    return build_welcome_info()


@router.api_route(
    "/api/info",
    methods=["GET", "HEAD"],
    response_model=RuntimeInfo,
    summary="Interpreter, platform, uptime and memory details.",
)
def runtime_info(
    settings: Settings = Depends(get_settings),
    probe: RuntimeProbe = Depends(get_runtime_probe),
) -> RuntimeInfo:
    """Describe the running process; every field is read at request time."""
    return probe.snapshot(settings.app_name)
