# wms_api/schemas/log.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class LogResponse(BaseModel):
    id: int
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    ts: datetime
    meta: Optional[Any] = None

    model_config = ConfigDict(from_attributes=True)

class LogPage(BaseModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int
