"""정산 API - 날짜별 통계, 날짜 일괄 정산"""
from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.settlement import SettleAllRequest, SettleAllResponse, SettlementStats
from app.services.settlements import get_settlement_stats, settle_all_orders_by_date

router = APIRouter(prefix="/api/settlements", tags=["settlements"])
log = structlog.get_logger(__name__)


@router.get("", response_model=SettlementStats)
def settlement_stats(
    target: date | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    if target is None:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    return SettlementStats(**get_settlement_stats(db, target)._asdict())


@router.patch("", response_model=SettleAllResponse)
def settle_all(data: SettleAllRequest, db: Session = Depends(get_db)):
    """해당 날짜 미정산 주문 전체 정산"""
    if data.date is None:
        raise HTTPException(status_code=400, detail="날짜가 필요합니다.")
    try:
        count = settle_all_orders_by_date(db, data.date)
    except Exception as e:
        log.exception("settle_all_failed", date=str(data.date))
        raise HTTPException(status_code=500, detail=f"일괄 정산 실패: {str(e)}")
    return SettleAllResponse(success=True, settled_count=count)
