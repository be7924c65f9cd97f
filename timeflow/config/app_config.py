#!filepath: timeflow/config/app_config.py
from __future__ import annotations

import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .clock_config import ClockConfig
from .log_config import LogConfig
from .source_config import SourceConfig
from timeflow.utils.errors import ConfigError

# env var -> (section, key)
ENV_OVERRIDES = {
    "TIMEFLOW_LOG_LEVEL": ("log", "level"),
    "TIMEFLOW_LOG_DIR": ("log", "dir"),
    "TIMEFLOW_CLOCK": ("clock", "kind"),
}


def package_root() -> str:
    """
    timeflow/config/app_config.py -> timeflow/config -> timeflow
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def default_config_path() -> str:
    return os.path.join(package_root(), "config", "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)

    @classmethod
    def load(cls, path: str | None = None, env_file: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to the packaged timeflow/config/base.yml
        - TIMEFLOW_* environment variables override the file
        - does not depend on the current working directory
        """
        # 1) .env first so overrides below can see it
        load_dotenv(env_file or os.path.join(os.getcwd(), ".env"))

        # 2) resolve the config path
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) read YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        # 4) env overrides
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None:
                continue
            raw.setdefault(section, {})
            raw[section] = dict(raw[section] or {}, **{key: value})

        return cls(**raw)
