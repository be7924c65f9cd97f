from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterator

# timeflow/core/time.py
US_PER_MILLISECOND = 1_000
US_PER_SECOND = 1_000_000


def wall_clock_us() -> int:
    """Wall-clock reading as integer epoch microseconds."""
    return time.time_ns() // 1_000


@dataclass(frozen=True)
class FixedClock:
    """
    Fake clock that always reads now_us.
    """
    now_us: int

    def __call__(self) -> int:
        return self.now_us


@dataclass
class SteppedClock:
    """
    Deterministic fake clock.

    - first call returns start_us
    - every further call advances by step_us
    """
    start_us: int = 0
    step_us: int = 1
    _next: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._next = self.start_us

    def __call__(self) -> int:
        now = self._next
        self._next += self.step_us
        return now


@dataclass(frozen=True)
class ReplayClock:
    """
    Host sampling ticks.

    - yields start_us .. end_us inclusive, every step_us
    - consumers iterate it, never mutate it
    """
    start_us: int
    end_us: int
    step_us: int = US_PER_SECOND

    def __post_init__(self) -> None:
        if self.step_us <= 0:
            raise ValueError(f"[ReplayClock] step_us must be positive: {self.step_us}")

    def __iter__(self) -> Iterator[int]:
        t = self.start_us
        while t <= self.end_us:
            yield t
            t += self.step_us
