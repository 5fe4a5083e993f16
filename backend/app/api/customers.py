"""고객 API - 관리자 고객 목록/블랙리스트, 연락처로 내 정보 조회"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.errors import OrderError, to_http
from app.database import get_db
from app.schemas.customer import CustomerResponse, CustomerUpdate
from app.services.customers import get_customer_by_contact, list_customers, set_blacklist
from app.services.dates import WEEKDAY_LABELS, get_weekly_order_days
from app.services.orders import get_orders, normalize_contact

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers_api(db: Session = Depends(get_db)):
    return list_customers(db)


@router.get("/by-contact", response_model=CustomerResponse | None)
def get_customer_by_contact_api(
    contact: str | None = Query(None),
    db: Session = Depends(get_db),
):
    """연락처로 고객 조회. 없으면 null. 정기 주문 요일(월~금 순)을 함께 반환"""
    digits = normalize_contact(contact)
    if not digits:
        raise HTTPException(status_code=400, detail="연락처가 필요합니다.")
    customer = get_customer_by_contact(db, digits)
    if customer is None:
        return None
    result = CustomerResponse.model_validate(customer)
    days = get_weekly_order_days(get_orders(db, contact=digits))
    result.weekly_order_days = [d for d in WEEKDAY_LABELS if d in days]
    return result


@router.patch("/{customer_id}", response_model=CustomerResponse)
def update_customer(customer_id: int, data: CustomerUpdate, db: Session = Depends(get_db)):
    """블랙리스트 설정/해제"""
    try:
        return set_blacklist(db, customer_id, data.is_blacklisted)
    except OrderError as e:
        db.rollback()
        raise to_http(e)
