"""일별 재고 모델 (key = 날짜). 재고 계산은 주문에서 직접 하므로 기록용"""
from datetime import date as date_type, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class DailyCapacity(Base):
    __tablename__ = "daily_capacity"

    date: Mapped[date_type] = mapped_column(Date, primary_key=True)
    max_capa: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    current_order_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_closed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
