"""주문 모델"""
from datetime import date as date_type, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class OrderSettlement(Base):
    """주문 날짜별 정산 정보 - 주문한 날짜 목록 겸 정산 여부"""

    __tablename__ = "order_settlements"
    __table_args__ = (UniqueConstraint("order_id", "date", name="uq_order_settlements_order_date"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    date: Mapped[date_type] = mapped_column(Date, nullable=False, index=True)
    is_settled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    order: Mapped["Order"] = relationship("Order", back_populates="settlements")


class Order(Base):
    """주문"""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    customer_id: Mapped[int | None] = mapped_column(
        ForeignKey("customers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    customer_name: Mapped[str] = mapped_column(String(128), nullable=False)
    contact: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(32), nullable=False)
    payment_method: Mapped[str | None] = mapped_column(String(32), nullable=True)
    allergies: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_weekly_order: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    settlements: Mapped[list["OrderSettlement"]] = relationship(
        "OrderSettlement",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderSettlement.id",
    )

    def find_settlement(self, target: date_type) -> OrderSettlement | None:
        return next((s for s in self.settlements if s.date == target), None)
