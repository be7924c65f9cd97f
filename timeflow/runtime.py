#!filepath: timeflow/runtime.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from timeflow.config import AppConfig, ClockConfig
from timeflow.core.events import TimestampedSource
from timeflow.core.time import FixedClock, ReplayClock, SteppedClock, wall_clock_us
from timeflow.core.types import Clock
from timeflow.utils.errors import ConfigError
from timeflow.utils.logger import logs


def build_clock(config: ClockConfig) -> Clock:
    if config.kind == "wall":
        return wall_clock_us
    if config.kind == "fixed":
        return FixedClock(config.start_us)
    if config.kind == "stepped":
        return SteppedClock(config.start_us, config.step_us)
    raise ConfigError(f"unknown clock kind: {config.kind}")


@dataclass
class Runtime:
    """
    Runtime = the host's single wiring point (read-only after construction)

    - Runtime owns the clock
    - every Source it hands out shares that clock and the retention window
    - no business logic
    """

    config: AppConfig
    clock: Clock

    def now(self) -> int:
        return self.clock()

    def new_source(self) -> TimestampedSource:
        return TimestampedSource(
            clock=self.clock,
            retention_us=self.config.source.retention_us,
        )

    def ticks(self, start_us: int, end_us: int) -> ReplayClock:
        return ReplayClock(start_us, end_us, self.config.clock.sample_step_us)


def build_runtime(config: Optional[AppConfig] = None) -> Runtime:
    if config is None:
        config = AppConfig.load()

    logs.configure(config.log)
    clock = build_clock(config.clock)

    logs.info(
        f"[Runtime] clock={config.clock.kind} "
        f"retention_us={config.source.retention_us} "
        f"sample_step_us={config.clock.sample_step_us}"
    )
    return Runtime(config=config, clock=clock)
