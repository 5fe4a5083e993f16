"""관리자 대시보드 / 유지보수 작업 스키마"""
from pydantic import BaseModel


class DayCount(BaseModel):
    day: str
    count: int


class TodayDelivery(BaseModel):
    total: int = 0
    kings_park: int = 0
    eastern_creek: int = 0


class WeeklySummary(BaseModel):
    total_orders: int
    expected_revenue: int
    orders_by_day: list[DayCount]
    today_delivery: TodayDelivery


class ResetCapacityResult(BaseModel):
    message: str
    deleted_count: int


class FixSundayResult(BaseModel):
    message: str
    orders_fixed: int
    customers_fixed: int
    total_fixed: int


class ExtendWeeklyResult(BaseModel):
    message: str
    orders_updated: int
    customer_orders_updated: int
    total_updated: int
