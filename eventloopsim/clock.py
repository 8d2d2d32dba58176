from __future__ import annotations

# Time sources for task timestamps. The scheduler never reads the wall clock
# directly, so tests can supply a ManualClock and assert exact durations.

import time
from dataclasses import dataclass
from typing import Protocol


class TimeSource(Protocol):
    def now_ms(self) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class SystemClock:
    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, delta_ms: float) -> None:
        if delta_ms < 0:
            raise ValueError(f"clock cannot move backwards (got {delta_ms})")
        self._now_ms += float(delta_ms)
