#!filepath: timeflow/utils/logger.py
from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:
    from timeflow.config.log_config import LogConfig

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    Logging facade over loguru
    ---------------------------------------
    - stderr sink by default (importing the package writes no files)
    - optional daily-rotated file sink with a retention window
    - reconfigurable at runtime via configure(LogConfig)
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        logger.remove()

        if self.log_dir is None:
            logger.add(sink=sys.stderr, level=self.level, format=_FORMAT)
            return

        os.makedirs(self.log_dir, exist_ok=True)
        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format=_FORMAT,
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )
        logger.info("-----------Logger initialized: {}-----------", self.log_dir)

    def configure(self, config: "LogConfig") -> None:
        """
        Re-point the global logger at the sinks described by config.
        """
        self.log_dir = config.dir
        self.rotation = config.rotation
        self.retention = config.retention
        self.level = config.level
        self._configure()

    # ---------- thin wrappers ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


# default global logs (re-pointed by Runtime through configure())
logs = Logging()
