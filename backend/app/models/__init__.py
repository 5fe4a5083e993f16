"""DB 모델"""
from app.models.customer import Customer
from app.models.order import Order, OrderSettlement
from app.models.daily_capacity import DailyCapacity
from app.models.notice import Notice

__all__ = [
    "Customer",
    "Order",
    "OrderSettlement",
    "DailyCapacity",
    "Notice",
]
