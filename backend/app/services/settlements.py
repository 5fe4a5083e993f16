"""날짜별 정산 통계 / 일괄 정산"""
from datetime import date
from typing import NamedTuple

import structlog
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.schemas.order import LOCATIONS
from app.services.customers import sync_customer_order
from app.services.orders import get_orders_for_date

log = structlog.get_logger(__name__)


class SettlementStats(NamedTuple):
    date: date
    total_orders: int
    settled_orders: int
    unsettled_orders: int
    location_breakdown: dict[str, int]


def get_settlement_stats(db: Session, target: date) -> SettlementStats:
    """target 날짜가 있는 주문들의 정산/미정산 수, 수령 장소별 건수"""
    orders = get_orders_for_date(db, target)
    settled = sum(
        1 for o in orders if any(s.date == target and s.is_settled for s in o.settlements)
    )
    breakdown = {loc: 0 for loc in LOCATIONS}
    for o in orders:
        breakdown[o.location] = breakdown.get(o.location, 0) + 1
    return SettlementStats(
        date=target,
        total_orders=len(orders),
        settled_orders=settled,
        unsettled_orders=len(orders) - settled,
        location_breakdown=breakdown,
    )


def settle_all_orders_by_date(db: Session, target: date) -> int:
    """
    target 날짜의 미정산 항목을 모두 정산 처리하고 한 번에 commit.
    실패 시 전체 롤백 (주문별 성공/실패 구분 없음). 정산된 주문 수 반환.
    """
    settled_orders = 0
    try:
        for order in get_orders_for_date(db, target):
            pending = [s for s in order.settlements if s.date == target and not s.is_settled]
            if not pending:
                continue
            for s in pending:
                s.is_settled = True
            order.updated_at = func.now()
            sync_customer_order(db, order)
            settled_orders += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    log.info("settle_all_by_date", date=str(target), orders=settled_orders)
    return settled_orders
