"""재고 API - 주문 폼에서 주기적으로 조회"""
from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db, get_optional_db
from app.schemas.capacity import CapacityResponse, CapacityUpdate
from app.services.capacity import default_capacities, get_capacities, get_capacity, record_capacity_request
from app.services.dates import get_next_week_dates, parse_date, today

router = APIRouter(prefix="/api/capacity", tags=["capacity"])
log = structlog.get_logger(__name__)


def _parse_dates(raw: str | None) -> list[date]:
    parts = [p.strip() for p in (raw or "").split(",") if p.strip()]
    if not parts:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    dates = []
    for p in parts:
        d = parse_date(p)
        if d is None:
            raise HTTPException(status_code=400, detail=f"올바른 날짜 형식이 아닙니다: {p}")
        dates.append(d)
    return dates


def _capacities_or_default(db: Session | None, dates: list[date]) -> list[CapacityResponse]:
    """DB 미설정 또는 조회 실패 시 기본값(0/30)"""
    if db is None:
        return [CapacityResponse(**c._asdict()) for c in default_capacities(dates)]
    try:
        capacities = get_capacities(db, dates)
    except Exception:
        log.exception("capacity_read_failed", dates=[str(d) for d in dates])
        capacities = default_capacities(dates)
    return [CapacityResponse(**c._asdict()) for c in capacities]


@router.get("", response_model=list[CapacityResponse])
def list_capacity(
    dates: str | None = Query(None, description="쉼표로 구분한 YYYY-MM-DD 목록"),
    db: Session | None = Depends(get_optional_db),
):
    return _capacities_or_default(db, _parse_dates(dates))


@router.get("/next-week", response_model=list[CapacityResponse])
def next_week_capacity(db: Session | None = Depends(get_optional_db)):
    """다음 주 월~금 재고"""
    return _capacities_or_default(db, get_next_week_dates(today()))


@router.post("", response_model=CapacityResponse)
def update_capacity(data: CapacityUpdate, db: Session = Depends(get_db)):
    """재고 수정 요청 기록. 최대값은 고정, 마감 기능은 미지원이라 계산 결과에는 반영되지 않음"""
    if data.date is None:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    try:
        record_capacity_request(db, data.date, max_capa=data.max_capa, is_closed=data.is_closed)
        return CapacityResponse(**get_capacity(db, data.date)._asdict())
    except Exception as e:
        db.rollback()
        log.exception("capacity_update_failed", date=str(data.date))
        raise HTTPException(status_code=500, detail=f"재고 수정 실패: {str(e)}")
