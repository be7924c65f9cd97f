# timeflow/config/source_config.py
from typing import Optional

from pydantic import BaseModel, Field


class SourceConfig(BaseModel):
    # None -> keep every occurrence; otherwise prune older than now - retention_us
    retention_us: Optional[int] = Field(default=None, gt=0)
