"""Process introspection backing the ``/api/info`` endpoint."""

from __future__ import annotations

import platform
import sys
import time
from typing import Callable, Optional

import psutil

from ..schemas import MemoryUsage, RuntimeInfo

RUNTIME_NAME = "Python"


class RuntimeProbe:
    """Read uptime and memory counters for a single process.

    Uptime is anchored once, at construction: the time the process had already
    been alive according to psutil, plus a monotonic clock reading taken at the
    same moment. Later readings only advance the monotonic part, so reported
    uptime never goes backwards when the wall clock is adjusted.
    """

    def __init__(
        self,
        process: Optional[psutil.Process] = None,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        self._process = process or psutil.Process()
        self._monotonic = monotonic
        self._anchor = monotonic()
        self._uptime_at_anchor = max(0.0, wall_clock() - self._process.create_time())

    def uptime(self) -> float:
        """Return seconds elapsed since the process started."""
        elapsed = max(0.0, self._monotonic() - self._anchor)
        return self._uptime_at_anchor + elapsed

    def memory(self) -> MemoryUsage:
        """Return a snapshot of the process memory counters."""
        info = self._process.memory_info()
        return MemoryUsage(
            rss=info.rss,
            vms=info.vms,
            percent=max(0.0, float(self._process.memory_percent())),
        )

    def snapshot(self, app_name: str) -> RuntimeInfo:
        """Collect the full runtime description for ``app_name``."""
        return RuntimeInfo(
            app=app_name,
            runtime=RUNTIME_NAME,
            version=platform.python_version(),
            platform=sys.platform,
            uptime=self.uptime(),
            memory=self.memory(),
        )
