"""주문 생성/조회/정산/취소/삭제"""
import re
from datetime import date, timedelta

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.config import get_settings
from app.core.errors import NotFound, ValidationFailed
from app.models import Order, OrderSettlement
from app.schemas.order import OrderCreate
from app.services.capacity import get_capacities
from app.services.customers import append_customer_order, sync_customer_order, upsert_customer
from app.services.dates import day_start_utc, get_weekly_recurring_dates, parse_date

log = structlog.get_logger(__name__)

ORDER_NOT_FOUND = "주문을 찾을 수 없습니다."
MIN_CONTACT_DIGITS = 10


def normalize_contact(value: str | None) -> str:
    """숫자만 남김: "0412 345 678" -> "0412345678" """
    return re.sub(r"\D", "", value or "")


def _validate(data: OrderCreate) -> tuple[str, str]:
    name = (data.name or "").strip()
    contact = normalize_contact(data.contact)
    if not name:
        raise ValidationFailed("이름을 입력해주세요.")
    if len(contact) < MIN_CONTACT_DIGITS:
        raise ValidationFailed("올바른 연락처를 입력해주세요.")
    if not data.location:
        raise ValidationFailed("수령 장소를 선택해주세요.")
    if not data.order_dates:
        raise ValidationFailed("최소 하나의 요일을 선택해주세요.")
    if not data.payment_method:
        raise ValidationFailed("결제 방법을 선택해주세요.")
    return name, contact


def _requested_dates(data: OrderCreate) -> list[date]:
    """요청 날짜 (중복 제거). 정기 주문이면 이후 주의 같은 요일까지 확장"""
    dates = list(dict.fromkeys(data.order_dates))
    if data.is_weekly_order:
        weeks = get_settings().weekly_order_weeks_ahead
        dates = [parse_date(s) for s in get_weekly_recurring_dates(dates, weeks)]
    return dates


def create_order(db: Session, data: OrderCreate) -> Order:
    """
    주문 생성.
    - 일반 주문: 재고 부족한 날짜가 하나라도 있으면 전체 실패
    - 정기 주문: 재고 부족한 날짜는 제외하고 진행, 남는 날짜가 없으면 실패
    재고 확인과 저장 사이에 잠금이 없으므로 동시 주문 시 초과될 수 있음.
    """
    name, contact = _validate(data)
    dates = _requested_dates(data)

    full = [c for c in get_capacities(db, dates) if c.is_full]
    if full and not data.is_weekly_order:
        c = full[0]
        raise ValidationFailed(
            f"{c.date.isoformat()} 날짜는 재고가 부족합니다. ({c.current_order_count}/{c.max_capa})"
        )
    if full:
        full_dates = {c.date for c in full}
        dates = [d for d in dates if d not in full_dates]
        if not dates:
            raise ValidationFailed("선택하신 요일들이 모두 재고가 부족합니다.")
        log.warning("weekly_order_dates_dropped", contact=contact, dates=[str(d) for d in sorted(full_dates)])

    allergies = (data.allergies or "").strip()
    customer = upsert_customer(
        db,
        name=name,
        contact=contact,
        location=data.location,
        allergies=allergies,
        is_weekly_order=data.is_weekly_order,
    )
    order = Order(
        customer_id=customer.id,
        customer_name=name,
        contact=contact,
        location=data.location,
        payment_method=data.payment_method,
        allergies=allergies,
        is_weekly_order=data.is_weekly_order,
        settlements=[OrderSettlement(date=d, is_settled=False) for d in dates],
    )
    db.add(order)
    db.flush()
    append_customer_order(customer, order)
    db.commit()
    db.refresh(order)
    log.info("order_created", order_id=order.id, dates=len(dates), weekly=order.is_weekly_order)
    return order


def get_orders(
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
    location: str | None = None,
    contact: str | None = None,
) -> list[Order]:
    """
    주문 목록 (최신순).
    contact: 정확히 일치, start_date/end_date: 영업 시간대 생성일 기준(포함), location: 메모리 필터.
    필수 필드가 빠진 주문은 건너뜀.
    """
    stmt = (
        select(Order)
        .options(selectinload(Order.settlements))
        .order_by(Order.created_at.desc(), Order.id.desc())
    )
    if contact:
        stmt = stmt.where(Order.contact == contact)
    if start_date:
        stmt = stmt.where(Order.created_at >= day_start_utc(start_date))
    if end_date:
        stmt = stmt.where(Order.created_at < day_start_utc(end_date + timedelta(days=1)))
    orders = []
    for order in db.execute(stmt).scalars().all():
        if not order.customer_name or not order.contact or not order.location:
            log.warning("order_missing_fields_skipped", order_id=order.id)
            continue
        orders.append(order)
    if location:
        orders = [o for o in orders if o.location == location]
    return orders


def get_orders_for_date(db: Session, target: date) -> list[Order]:
    """정산 목록에 target 날짜가 있는 주문"""
    stmt = (
        select(Order)
        .join(OrderSettlement, OrderSettlement.order_id == Order.id)
        .where(OrderSettlement.date == target)
        .options(selectinload(Order.settlements))
        .order_by(Order.location, Order.customer_name, Order.id)
    )
    return list(db.execute(stmt).scalars().unique().all())


def get_order(db: Session, order_id: int) -> Order:
    order = db.get(Order, order_id)
    if not order:
        raise NotFound(ORDER_NOT_FOUND)
    return order


def settle_order_date(db: Session, order_id: int, target: date) -> Order:
    """해당 날짜 정산 처리. 날짜가 없으면 정산된 상태로 추가. 여러 번 호출해도 결과 동일"""
    order = get_order(db, order_id)
    settlement = order.find_settlement(target)
    if settlement:
        settlement.is_settled = True
    else:
        order.settlements.append(OrderSettlement(date=target, is_settled=True))
    order.updated_at = func.now()
    db.flush()
    sync_customer_order(db, order)
    db.commit()
    db.refresh(order)
    log.info("order_date_settled", order_id=order_id, date=str(target))
    return order


def cancel_date(db: Session, order_id: int, target: date, cancel_all_weekly: bool = False) -> tuple[str, Order]:
    """
    날짜 취소. 정기 주문 + cancel_all_weekly면 같은 요일 날짜 전부 취소.
    주문 저장 후 고객 문서 사본도 갱신.
    """
    order = get_order(db, order_id)
    all_weekly = cancel_all_weekly and order.is_weekly_order
    if all_weekly:
        removed = [s for s in order.settlements if s.date.weekday() == target.weekday()]
    else:
        removed = [s for s in order.settlements if s.date == target]
    for s in removed:
        order.settlements.remove(s)
    order.updated_at = func.now()
    db.flush()
    sync_customer_order(db, order)
    db.commit()
    db.refresh(order)
    log.info("order_date_canceled", order_id=order_id, date=str(target), removed=len(removed), all_weekly=all_weekly)
    message = "해당 요일의 모든 주문이 취소되었습니다." if cancel_all_weekly else "해당 날짜의 주문이 취소되었습니다."
    return message, order


def delete_order(db: Session, order_id: int) -> None:
    """주문 삭제. 고객 문서의 주문 사본은 정리하지 않음"""
    order = get_order(db, order_id)
    db.delete(order)
    db.commit()
    log.info("order_deleted", order_id=order_id)
