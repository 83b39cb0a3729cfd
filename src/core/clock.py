"""Injectable wall-clock sources.

Identity generation reads time through this seam so that tests
and idempotent replays can pin the clock.
"""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Protocol


class Clock(Protocol):
    """Time source returning epoch milliseconds."""

    def now_millis(self) -> int:
        """Return current time as integer milliseconds since the epoch."""


class SystemClock:
    """Wall-clock time source."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant."""

    millis: int

    def now_millis(self) -> int:
        return self.millis
