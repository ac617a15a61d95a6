"""Frame timer measuring the seconds between ticks."""

from __future__ import annotations

import time
from collections.abc import Callable

_START_NS = time.monotonic_ns()


def _milliseconds_since_start() -> int:
    return (time.monotonic_ns() - _START_NS) // 1_000_000


class Timer:
    """Tracks elapsed milliseconds and the delta between consecutive ticks."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _milliseconds_since_start
        self.current_time = 0
        self.last_time = 0
        self.delta_seconds = 0.0

    def tick(self) -> None:
        """Sample the clock and update ``delta_seconds``."""
        self.current_time = self._clock()
        self.delta_seconds = (self.current_time - self.last_time) / 1000.0
        self.last_time = self.current_time