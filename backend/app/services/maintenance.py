"""유지보수 일괄 작업 - 재실행해도 결과가 같도록 작성. batch_size 단위로 commit"""
from collections import Counter
from datetime import date, timedelta
from typing import NamedTuple

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.config import get_settings
from app.models import Customer, DailyCapacity, Order, OrderSettlement
from app.services.capacity import count_orders_by_date
from app.services.customers import sync_customer_order
from app.services.dates import fix_sunday, format_date, parse_date, week_monday

log = structlog.get_logger(__name__)


class FixSundayCounts(NamedTuple):
    orders_fixed: int
    customers_fixed: int


class ExtendWeeklyCounts(NamedTuple):
    orders_updated: int
    customer_orders_updated: int


def _batch_size() -> int:
    return max(get_settings().maintenance_batch_size, 1)


def reset_capacity(db: Session) -> int:
    """daily_capacity 전체 삭제 (재고는 주문에서 계산하므로 정리용). 삭제 건수 반환"""
    rows = list(db.execute(select(DailyCapacity)).scalars().all())
    size = _batch_size()
    for i in range(0, len(rows), size):
        for row in rows[i : i + size]:
            db.delete(row)
        db.commit()
    log.info("reset_capacity", deleted=len(rows))
    return len(rows)


def _fix_order_sundays(order: Order) -> int:
    fixed = 0
    for s in list(order.settlements):
        if s.date.weekday() != 6:
            continue
        friday = fix_sunday(s.date)
        log.info("sunday_fixed", order_id=order.id, before=str(s.date), after=str(friday))
        if order.find_settlement(friday) is not None:
            # 같은 주문에 금요일이 이미 있으면 일요일 항목만 제거
            order.settlements.remove(s)
        else:
            s.date = friday
        fixed += 1
    return fixed


def _fix_mirror_sundays(entry: dict) -> tuple[dict, int]:
    """주문과 같은 규칙: 금요일이 이미 있으면 일요일 항목 제거, 없으면 금요일로 변경"""
    fixed = 0
    original = entry.get("settlements") or []
    present = {s.get("date") for s in original}
    settlements = []
    for s in original:
        d = parse_date(s.get("date"))
        if d is not None and d.weekday() == 6:
            friday = format_date(fix_sunday(d))
            fixed += 1
            if friday in present:
                continue
            s = {**s, "date": friday}
            present.add(friday)
        settlements.append(s)
    return {**entry, "settlements": settlements}, fixed


def fix_sunday_dates(db: Session) -> FixSundayCounts:
    """일요일로 잘못 저장된 정산 날짜를 이틀 전 금요일로 수정 (주문 + 고객 사본)"""
    size = _batch_size()
    orders = list(db.execute(select(Order).options(selectinload(Order.settlements))).scalars().all())
    orders_fixed = 0
    pending = 0
    for order in orders:
        n = _fix_order_sundays(order)
        if not n:
            continue
        order.updated_at = func.now()
        orders_fixed += n
        pending += 1
        if pending >= size:
            db.commit()
            pending = 0
    db.commit()

    customers_fixed = 0
    pending = 0
    for customer in db.execute(select(Customer)).scalars().all():
        changed = False
        entries = []
        for entry in customer.orders or []:
            new_entry, n = _fix_mirror_sundays(entry)
            customers_fixed += n
            changed = changed or n > 0
            entries.append(new_entry)
        if not changed:
            continue
        customer.orders = entries
        pending += 1
        if pending >= size:
            db.commit()
            pending = 0
    db.commit()
    log.info("fix_sunday_dates", orders_fixed=orders_fixed, customers_fixed=customers_fixed)
    return FixSundayCounts(orders_fixed, customers_fixed)


def weekly_window(base: date, keep_weeks: int) -> tuple[date, date, date]:
    """(이번 주 월요일, 다음 주 월요일, 유지 범위 마지막 금요일)"""
    this_monday = week_monday(base)
    return this_monday, this_monday + timedelta(days=7), this_monday + timedelta(days=7 * keep_weeks + 4)


def extend_weekly_orders(db: Session, base: date) -> ExtendWeeklyCounts:
    """
    정기 주문 날짜 정리:
    - 기존 정산 날짜의 요일 패턴 추출
    - 이번 주 월요일 ~ (이번 주 + keep_weeks주) 금요일 범위 밖 날짜 제거
    - 다음 주 월요일부터 범위 끝까지 패턴 요일 중 없는 날짜 추가 (재고 부족 날짜 제외)
    """
    settings = get_settings()
    size = _batch_size()
    start, fill_from, end = weekly_window(base, settings.weekly_order_keep_weeks)
    orders = list(
        db.execute(
            select(Order).where(Order.is_weekly_order.is_(True)).options(selectinload(Order.settlements))
        ).scalars().all()
    )

    candidates_all = [fill_from + timedelta(days=i) for i in range((end - fill_from).days + 1)]
    counts = count_orders_by_date(db, candidates_all)
    added_per_date: Counter[date] = Counter()

    orders_updated = 0
    mirrors_updated = 0
    pending = 0
    for order in orders:
        if not order.settlements:
            continue
        pattern = {s.date.weekday() for s in order.settlements if s.date.weekday() < 5}
        removed = [s for s in order.settlements if not (start <= s.date <= end)]
        for s in removed:
            order.settlements.remove(s)
        existing = {s.date for s in order.settlements}
        added = []
        for d in candidates_all:
            if d.weekday() not in pattern or d in existing:
                continue
            if counts.get(d, 0) + added_per_date[d] >= settings.max_capa:
                log.warning("weekly_extend_date_full", order_id=order.id, date=str(d))
                continue
            order.settlements.append(OrderSettlement(date=d, is_settled=False))
            added_per_date[d] += 1
            added.append(d)
        if not removed and not added:
            continue
        order.updated_at = func.now()
        db.flush()
        if sync_customer_order(db, order):
            mirrors_updated += 1
        orders_updated += 1
        log.info("weekly_order_extended", order_id=order.id, removed=len(removed), added=len(added))
        pending += 1
        if pending >= size:
            db.commit()
            pending = 0
    db.commit()
    return ExtendWeeklyCounts(orders_updated, mirrors_updated)
