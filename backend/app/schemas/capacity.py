"""재고 스키마"""
from datetime import date as date_type

from pydantic import BaseModel, Field


class CapacityResponse(BaseModel):
    date: date_type
    max_capa: int
    current_order_count: int
    remaining: int
    is_closed: bool = False


class CapacityUpdate(BaseModel):
    date: date_type | None = None
    max_capa: int | None = Field(None, ge=0, le=999)
    is_closed: bool | None = None
