"""고객 모델"""
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Customer(Base):
    """고객 - 연락처 기준으로 식별"""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    contact: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    location: Mapped[str | None] = mapped_column(String(32), nullable=True)
    allergies: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_blacklisted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_weekly_order: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # 주문별 정산 목록 사본: [{order_id, settlements, is_weekly_order, created_at}]
    orders: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    @property
    def total_orders(self) -> int:
        return len(self.orders or [])
