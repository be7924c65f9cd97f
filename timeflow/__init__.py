#!filepath: timeflow/__init__.py

from .utils.logger import Logging, logs
from .core import (
    Accumulator,
    Behaviour,
    Constant,
    Event,
    Function,
    Never,
    Occurrence,
    Source,
    Stepper,
    TimestampedSource,
    collect,
    union,
)
from .config.app_config import AppConfig
from .runtime import Runtime, build_runtime

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "Runtime", "build_runtime",
    "Event", "Never", "Source", "TimestampedSource", "union", "collect",
    "Behaviour", "Constant", "Stepper", "Accumulator",
    "Occurrence", "Function",
]
