"""고객 스키마"""
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.order import Location, SettlementItem


class CustomerOrder(BaseModel):
    """고객 문서에 복사된 주문별 정산 목록"""
    order_id: int
    settlements: list[SettlementItem] = Field(default_factory=list)
    is_weekly_order: bool = False
    created_at: str = ""


class CustomerResponse(BaseModel):
    id: int
    name: str
    contact: str
    location: Location | None = None
    total_orders: int = 0
    is_blacklisted: bool = False
    is_weekly_order: bool = False
    orders: list[CustomerOrder] = Field(default_factory=list)
    weekly_order_days: list[str] = Field(default_factory=list)  # 연락처 조회 시에만 채움
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class CustomerUpdate(BaseModel):
    is_blacklisted: bool
