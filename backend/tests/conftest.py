"""Shared pytest fixtures for backend tests."""

from __future__ import annotations

import os
from pathlib import Path

import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
WORKSPACE_ROOT = ROOT.parent
for path in (ROOT, WORKSPACE_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from app.config import get_settings  # noqa: E402
from app.dependencies import get_runtime_probe  # noqa: E402
from app.main import create_app  # noqa: E402


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register custom CLI flags for backend test suite."""
    parser.addoption(
        "--prod-smoke",
        action="store_true",
        default=False,
        help=(
            "Run tests marked with @pytest.mark.prod against a deployed instance. "
            "Also enabled when RUN_PROD_SMOKE is set to a truthy value."
        ),
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "prod: smoke tests against a deployed instance")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip deployed smoke tests unless explicitly enabled."""
    if config.getoption("--prod-smoke"):
        return
    env_flag = os.getenv("RUN_PROD_SMOKE", "").strip()
    if env_flag.lower() in {"1", "true", "yes", "on"}:
        return
    skip_prod = pytest.mark.skip(reason="Deployed smoke tests disabled; pass --prod-smoke to enable.")
    for item in items:
        if "prod" in item.keywords:
            item.add_marker(skip_prod)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings and probe so each test sees its own environment."""
    get_settings.cache_clear()
    get_runtime_probe.cache_clear()
    yield
    get_settings.cache_clear()
    get_runtime_probe.cache_clear()


@pytest.fixture()
def api_client() -> TestClient:
    """Provide a FastAPI TestClient with dependency overrides reset after use."""
    app = create_app()
    client = TestClient(app)
    try:
        yield client
    finally:
        app.dependency_overrides.clear()
