"""고객 조회/블랙리스트 및 고객 문서의 주문 사본(orders) 동기화"""
from datetime import datetime, timezone

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import Customer, Order
from app.services.dates import format_date

log = structlog.get_logger(__name__)

CUSTOMER_NOT_FOUND = "고객을 찾을 수 없습니다."


def settlements_to_json(order: Order) -> list[dict]:
    return [{"date": format_date(s.date), "is_settled": bool(s.is_settled)} for s in order.settlements]


def customer_order_entry(order: Order) -> dict:
    created = order.created_at or datetime.now(timezone.utc)
    return {
        "order_id": order.id,
        "settlements": settlements_to_json(order),
        "is_weekly_order": bool(order.is_weekly_order),
        "created_at": created.isoformat(),
    }


def list_customers(db: Session) -> list[Customer]:
    stmt = select(Customer).order_by(Customer.created_at.desc(), Customer.id.desc())
    return list(db.execute(stmt).scalars().all())


def get_customer_by_contact(db: Session, contact: str) -> Customer | None:
    """연락처 정확히 일치하는 고객 (없으면 None)"""
    stmt = select(Customer).where(Customer.contact == contact)
    return db.execute(stmt).scalars().first()


def upsert_customer(
    db: Session,
    *,
    name: str,
    contact: str,
    location: str,
    allergies: str = "",
    is_weekly_order: bool = False,
) -> Customer:
    """연락처로 고객 조회 후 갱신, 없으면 생성 (flush만, commit은 호출자)"""
    customer = get_customer_by_contact(db, contact)
    if customer:
        customer.name = name
        customer.location = location
        customer.allergies = allergies
        customer.is_weekly_order = is_weekly_order
    else:
        customer = Customer(
            name=name,
            contact=contact,
            location=location,
            allergies=allergies,
            is_weekly_order=is_weekly_order,
            orders=[],
        )
        db.add(customer)
        log.info("customer_created", contact=contact)
    db.flush()
    return customer


def append_customer_order(customer: Customer, order: Order) -> None:
    customer.orders = [*(customer.orders or []), customer_order_entry(order)]


def sync_customer_order(db: Session, order: Order) -> bool:
    """
    주문의 현재 정산 목록을 고객 문서 사본에 반영.
    사본에 해당 주문이 없으면 추가. 고객이 없으면 False.
    """
    if order.customer_id is None:
        return False
    customer = db.get(Customer, order.customer_id)
    if customer is None:
        log.warning("customer_missing_for_order", order_id=order.id, customer_id=order.customer_id)
        return False
    entries = list(customer.orders or [])
    settlements = settlements_to_json(order)
    for i, entry in enumerate(entries):
        if entry.get("order_id") == order.id:
            entries[i] = {**entry, "settlements": settlements}
            break
    else:
        entries.append(customer_order_entry(order))
    customer.orders = entries
    return True


def set_blacklist(db: Session, customer_id: int, is_blacklisted: bool) -> Customer:
    customer = db.get(Customer, customer_id)
    if not customer:
        raise NotFound(CUSTOMER_NOT_FOUND)
    customer.is_blacklisted = is_blacklisted
    db.commit()
    db.refresh(customer)
    log.info("customer_blacklist_updated", customer_id=customer_id, is_blacklisted=is_blacklisted)
    return customer
