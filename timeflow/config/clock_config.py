# timeflow/config/clock_config.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from timeflow.core.time import US_PER_SECOND


class ClockConfig(BaseModel):
    """
    ClockConfig

    Semantics:
      - wall:    real clock, integer microseconds
      - fixed:   always returns start_us (deterministic tests)
      - stepped: start_us, start_us + step_us, ... one reading per call
      - sample_step_us is the host tick used by Runtime.ticks()
    """

    kind: Literal["wall", "fixed", "stepped"] = "wall"
    start_us: int = 0
    step_us: int = Field(default=1, gt=0)

    sample_step_us: int = Field(default=US_PER_SECOND, gt=0)
