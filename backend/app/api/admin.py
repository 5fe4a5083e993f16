"""관리자 API - 대시보드 요약, 유지보수 작업 (재고 초기화, 일요일 날짜 수정, 정기 주문 날짜 정리)"""
import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.schemas.admin import ExtendWeeklyResult, FixSundayResult, ResetCapacityResult, WeeklySummary
from app.services.dates import today
from app.services.maintenance import extend_weekly_orders, fix_sunday_dates, reset_capacity
from app.services.summary import get_weekly_summary

router = APIRouter(prefix="/api/admin", tags=["admin"])
log = structlog.get_logger(__name__)


@router.get("/summary", response_model=WeeklySummary)
def weekly_summary(db: Session = Depends(get_db)):
    return get_weekly_summary(db, today())


@router.post("/reset-capacity", response_model=ResetCapacityResult)
def reset_capacity_api(db: Session = Depends(get_db)):
    """daily_capacity 테이블 정리 (재고는 주문에서 직접 계산)"""
    try:
        deleted = reset_capacity(db)
    except Exception as e:
        db.rollback()
        log.exception("reset_capacity_failed")
        raise HTTPException(status_code=500, detail=f"초기화 중 오류가 발생했습니다: {str(e)}")
    if not deleted:
        return ResetCapacityResult(message="daily_capacity 테이블이 이미 비어있습니다.", deleted_count=0)
    return ResetCapacityResult(
        message=f"daily_capacity 테이블에서 {deleted}개의 항목을 삭제했습니다.", deleted_count=deleted
    )


@router.post("/fix-sunday-dates", response_model=FixSundayResult)
def fix_sunday_dates_api(db: Session = Depends(get_db)):
    """일요일로 잘못 저장된 날짜를 금요일로 수정"""
    try:
        counts = fix_sunday_dates(db)
    except Exception as e:
        db.rollback()
        log.exception("fix_sunday_dates_failed")
        raise HTTPException(status_code=500, detail=f"날짜 수정 중 오류가 발생했습니다: {str(e)}")
    return FixSundayResult(
        message="일요일 날짜를 금요일로 수정 완료",
        orders_fixed=counts.orders_fixed,
        customers_fixed=counts.customers_fixed,
        total_fixed=counts.orders_fixed + counts.customers_fixed,
    )


@router.post("/add-next-week-to-weekly-orders", response_model=ExtendWeeklyResult)
def extend_weekly_orders_api(db: Session = Depends(get_db)):
    """정기 주문 날짜를 이번 주 + N주 범위로 정리하고 빠진 요일 날짜 추가"""
    weeks = get_settings().weekly_order_keep_weeks
    try:
        counts = extend_weekly_orders(db, today())
    except Exception as e:
        db.rollback()
        log.exception("extend_weekly_orders_failed")
        raise HTTPException(status_code=500, detail=f"날짜 추가 중 오류가 발생했습니다: {str(e)}")
    return ExtendWeeklyResult(
        message=f"정기 주문을 이번 주 + {weeks}주 범위로 정리 완료",
        orders_updated=counts.orders_updated,
        customer_orders_updated=counts.customer_orders_updated,
        total_updated=counts.orders_updated + counts.customer_orders_updated,
    )
