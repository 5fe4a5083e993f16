"""날짜별 재고 계산 - 주문 정산 목록에서 날짜별 주문 건수를 직접 집계"""
from datetime import date
from typing import NamedTuple

import structlog
from sqlalchemy import distinct, func, select
from sqlalchemy.orm import Session

from app.config import get_settings
from app.models import DailyCapacity, OrderSettlement

log = structlog.get_logger(__name__)


class Capacity(NamedTuple):
    date: date
    max_capa: int
    current_order_count: int
    remaining: int
    is_closed: bool = False

    @property
    def is_full(self) -> bool:
        return self.current_order_count >= self.max_capa


def _make(d: date, count: int) -> Capacity:
    max_capa = get_settings().max_capa
    return Capacity(
        date=d,
        max_capa=max_capa,
        current_order_count=count,
        remaining=max(max_capa - count, 0),
    )


def default_capacities(dates: list[date]) -> list[Capacity]:
    """DB 미설정/조회 실패 시 기본값"""
    return [_make(d, 0) for d in dates]


def count_orders_by_date(db: Session, dates: list[date]) -> dict[date, int]:
    """날짜별로 해당 날짜가 정산 목록에 있는 주문 수"""
    if not dates:
        return {}
    stmt = (
        select(OrderSettlement.date, func.count(distinct(OrderSettlement.order_id)))
        .where(OrderSettlement.date.in_(sorted(set(dates))))
        .group_by(OrderSettlement.date)
    )
    return {d: int(n) for d, n in db.execute(stmt).all()}


def get_capacities(db: Session, dates: list[date]) -> list[Capacity]:
    """요청 순서대로 재고 반환. 마감(is_closed)은 미구현 - 항상 False"""
    counts = count_orders_by_date(db, dates)
    return [_make(d, counts.get(d, 0)) for d in dates]


def get_capacity(db: Session, d: date) -> Capacity:
    return get_capacities(db, [d])[0]


def record_capacity_request(
    db: Session,
    d: date,
    max_capa: int | None = None,
    is_closed: bool | None = None,
) -> DailyCapacity:
    """
    관리자 재고 수정 요청을 daily_capacity에 기록.
    재고 계산은 주문 집계와 고정 최대값만 사용하므로 여기 값은 반영되지 않음.
    """
    row = db.get(DailyCapacity, d)
    if row is None:
        row = DailyCapacity(date=d, max_capa=get_settings().max_capa, current_order_count=0, is_closed=False)
        db.add(row)
    if max_capa is not None:
        row.max_capa = max_capa
    if is_closed is not None:
        row.is_closed = is_closed
    row.current_order_count = count_orders_by_date(db, [d]).get(d, 0)
    db.commit()
    log.info("capacity_request_recorded", date=str(d), max_capa=max_capa, is_closed=is_closed)
    return row
