from .app_config import AppConfig
from .clock_config import ClockConfig
from .log_config import LogConfig
from .source_config import SourceConfig

__all__ = ["AppConfig", "ClockConfig", "LogConfig", "SourceConfig"]
