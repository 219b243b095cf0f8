#!/usr/bin/env python3
"""Basic environment sanity checks for the K8-Bit test app."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ENV_FILENAMES = (".env.local", ".env")


def parse_env(content: str) -> dict[str, str]:
    """Parse a dotenv-style string into a dictionary."""
    data: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("'").strip('"')
        data[key] = value
    return data


def load_env() -> dict[str, str]:
    """Merge OS environment variables with values from .env files."""
    env: dict[str, str] = dict(os.environ)
    repo_root = Path(__file__).resolve().parent.parent
    for filename in ENV_FILENAMES:
        path = repo_root / filename
        if not path.exists():
            continue
        env.update(parse_env(path.read_text(encoding="utf8")))
    return env


def find_issues(env: dict[str, str]) -> list[str]:
    """Return human-readable problems with the runtime environment."""
    from app.config import parse_port
    from app.logging_utils import parse_log_level

    issues: list[str] = []

    raw_port = env.get("PORT", "")
    if raw_port.strip() and parse_port(raw_port) is None:
        issues.append(f"PORT={raw_port!r} is not a valid TCP port; the server will fall back to 3000.")

    for name in ("K8BIT_LOG_LEVEL", "LOG_LEVEL"):
        raw_level = env.get(name, "").strip()
        if raw_level and parse_log_level(raw_level) is None:
            issues.append(f"{name}={raw_level!r} is not a logging level; INFO will be used.")

    return issues


def main() -> int:
    backend_root = Path(__file__).resolve().parent.parent / "backend"
    if str(backend_root) not in sys.path:
        sys.path.insert(0, str(backend_root))

    issues = find_issues(load_env())
    if issues:
        print("[check-env] Issues detected:")
        for entry in issues:
            print(f"  - {entry}")
        return 1

    print("[check-env] Environment variables look good.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
