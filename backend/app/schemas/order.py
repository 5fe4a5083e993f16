"""주문 스키마"""
from datetime import date as date_type, datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

Location = Literal["Kings Park", "Eastern Creek"]
PaymentMethod = Literal["cash", "bank_transfer"]
LOCATIONS: tuple[str, ...] = ("Kings Park", "Eastern Creek")


class SettlementItem(BaseModel):
    """날짜별 정산 정보"""
    date: date_type
    is_settled: bool = False

    model_config = {"from_attributes": True}


class OrderCreate(BaseModel):
    """주문 폼 제출. 필수값 검증은 서비스에서 (한국어 메시지)"""
    name: str = ""
    contact: str = ""
    location: Location | None = None
    order_dates: list[date_type] = Field(
        default_factory=list, validation_alias=AliasChoices("orderDates", "order_dates")
    )
    payment_method: PaymentMethod | None = None
    allergies: str | None = Field(None, max_length=1000)
    is_weekly_order: bool = False


class OrderResponse(BaseModel):
    id: int
    customer_id: int | None = None
    customer_name: str
    contact: str
    location: Location
    payment_method: PaymentMethod | None = None
    allergies: str = ""
    settlements: list[SettlementItem] = Field(default_factory=list)
    is_weekly_order: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class OrderDateRequest(BaseModel):
    """특정 날짜 정산 요청"""
    date: date_type | None = None


class CancelDateRequest(BaseModel):
    date: date_type | None = None
    cancel_all_weekly: bool = Field(
        False, validation_alias=AliasChoices("cancelAllWeekly", "cancel_all_weekly")
    )


class CancelDateResponse(BaseModel):
    message: str
    settlements: list[SettlementItem]
