"""정산 스키마"""
from datetime import date as date_type

from pydantic import BaseModel


class SettlementStats(BaseModel):
    """날짜별 정산 통계"""
    date: date_type
    total_orders: int
    settled_orders: int
    unsettled_orders: int
    location_breakdown: dict[str, int]


class SettleAllRequest(BaseModel):
    date: date_type | None = None


class SettleAllResponse(BaseModel):
    success: bool = True
    settled_count: int = 0
