"""공지 스키마"""
from datetime import datetime

from pydantic import BaseModel


class NoticeResponse(BaseModel):
    id: int
    title: str
    content: str = ""
    is_active: bool = True
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
