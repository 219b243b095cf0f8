"""Testing utilities and process stubs."""

from __future__ import annotations

from collections import namedtuple

MemoryInfo = namedtuple("MemoryInfo", ["rss", "vms"])


class StubProcess:
    """Minimal stand-in for :class:`psutil.Process` with fixed counters."""

    def __init__(
        self,
        *,
        create_time: float = 1_000.0,
        rss: int = 64 * 1024 * 1024,
        vms: int = 256 * 1024 * 1024,
        percent: float = 1.5,
    ) -> None:
        self._create_time = create_time
        self.rss = rss
        self.vms = vms
        self.percent = percent

    def create_time(self) -> float:
        return self._create_time

    def memory_info(self) -> MemoryInfo:
        return MemoryInfo(rss=self.rss, vms=self.vms)

    def memory_percent(self) -> float:
        return self.percent


class StubClock:
    """Manually advanced clock usable as ``time.monotonic`` or ``time.time``."""

    def __init__(self, start: float = 0.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds
