"""주문 API - 주문 폼 제출, 내 주문 조회, 관리자 정산/취소/삭제"""
from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.errors import OrderError, to_http
from app.database import get_db
from app.schemas.order import (
    CancelDateRequest,
    CancelDateResponse,
    OrderCreate,
    OrderDateRequest,
    OrderResponse,
    SettlementItem,
)
from app.services.export import build_delivery_workbook
from app.services.orders import (
    cancel_date,
    create_order,
    delete_order,
    get_order,
    get_orders,
    get_orders_for_date,
    normalize_contact,
    settle_order_date,
)

router = APIRouter(prefix="/api/orders", tags=["orders"])
log = structlog.get_logger(__name__)


@router.get("", response_model=list[OrderResponse])
def list_orders(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    location: str | None = Query(None),
    contact: str | None = Query(None),
    db: Session = Depends(get_db),
):
    try:
        return get_orders(
            db,
            start_date=start_date,
            end_date=end_date,
            location=location or None,
            contact=normalize_contact(contact) or None,
        )
    except Exception as e:
        log.exception("order_list_failed")
        raise HTTPException(status_code=500, detail=f"주문 내역을 불러오는 중 오류가 발생했습니다: {str(e)}")


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order_api(data: OrderCreate, db: Session = Depends(get_db)):
    """주문 생성 - 재고 확인 후 고객 갱신, 날짜별 정산 항목 생성"""
    try:
        return create_order(db, data)
    except OrderError as e:
        db.rollback()
        raise to_http(e)
    except Exception:
        db.rollback()
        log.exception("order_create_failed", contact=normalize_contact(data.contact))
        raise HTTPException(status_code=500, detail="주문 처리 중 오류가 발생했습니다.")


@router.get("/export/excel")
def export_orders_excel(
    target: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """배송일 주문 목록 Excel 다운로드"""
    orders = get_orders_for_date(db, target)
    buf = build_delivery_workbook(orders, target)
    return StreamingResponse(
        buf,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f"attachment; filename=orders_{target.strftime('%Y%m%d')}.xlsx"},
    )


@router.get("/{order_id}", response_model=OrderResponse)
def get_order_api(order_id: int, db: Session = Depends(get_db)):
    try:
        return get_order(db, order_id)
    except OrderError as e:
        raise to_http(e)


def _settle(db: Session, order_id: int, data: OrderDateRequest):
    if data.date is None:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    try:
        return settle_order_date(db, order_id, data.date)
    except OrderError as e:
        db.rollback()
        raise to_http(e)
    except Exception as e:
        db.rollback()
        log.exception("order_settle_failed", order_id=order_id)
        raise HTTPException(status_code=500, detail=f"정산 처리 실패: {str(e)}")


@router.patch("/{order_id}", response_model=OrderResponse)
def settle_order_patch(order_id: int, data: OrderDateRequest, db: Session = Depends(get_db)):
    return _settle(db, order_id, data)


@router.post("/{order_id}/settle", response_model=OrderResponse)
def settle_order_api(order_id: int, data: OrderDateRequest, db: Session = Depends(get_db)):
    """특정 주문의 특정 날짜 정산 처리"""
    return _settle(db, order_id, data)


@router.post("/{order_id}/cancel-date", response_model=CancelDateResponse)
def cancel_order_date(order_id: int, data: CancelDateRequest, db: Session = Depends(get_db)):
    """날짜 취소 - cancelAllWeekly면 정기 주문의 같은 요일 전체 취소"""
    if data.date is None:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    try:
        message, order = cancel_date(db, order_id, data.date, data.cancel_all_weekly)
    except OrderError as e:
        db.rollback()
        raise to_http(e)
    except Exception:
        db.rollback()
        log.exception("order_cancel_date_failed", order_id=order_id)
        raise HTTPException(status_code=500, detail="날짜 취소 중 오류가 발생했습니다.")
    return CancelDateResponse(
        message=message,
        settlements=[SettlementItem.model_validate(s) for s in order.settlements],
    )


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order_api(order_id: int, db: Session = Depends(get_db)):
    try:
        delete_order(db, order_id)
    except OrderError as e:
        raise to_http(e)
    except Exception as e:
        db.rollback()
        log.exception("order_delete_failed", order_id=order_id)
        raise HTTPException(status_code=500, detail=f"삭제 실패: {str(e)}")
