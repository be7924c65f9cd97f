#!filepath: timeflow/config/log_config.py
from typing import Optional

from pydantic import BaseModel


class LogConfig(BaseModel):
    dir: Optional[str] = None  # None -> stderr only
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"
