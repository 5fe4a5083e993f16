"""공지 API - 최신 활성 공지 1건"""
import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.database import get_optional_db
from app.models import Notice
from app.schemas.notice import NoticeResponse

router = APIRouter(prefix="/api/notices", tags=["notices"])
log = structlog.get_logger(__name__)


@router.get("", response_model=NoticeResponse | None)
def latest_notice(db: Session | None = Depends(get_optional_db)):
    """공지가 없거나 DB 미설정/조회 실패 시 null"""
    if db is None:
        return None
    stmt = (
        select(Notice)
        .where(Notice.is_active.is_(True))
        .order_by(Notice.created_at.desc(), Notice.id.desc())
        .limit(1)
    )
    try:
        return db.execute(stmt).scalars().first()
    except Exception:
        log.exception("notice_read_failed")
        return None
