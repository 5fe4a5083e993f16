"""DB 연결 및 세션 관리"""
from collections.abc import Generator

from fastapi import HTTPException, status
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from app.config import get_settings

settings = get_settings()
engine = (
    create_engine(
        settings.database_url,
        pool_pre_ping=True,
        echo=False,
    )
    if settings.database_configured
    else None
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

NOT_CONFIGURED_MESSAGE = "데이터베이스가 설정되지 않았습니다. DATABASE_URL 환경 변수를 확인해주세요."


def get_db() -> Generator[Session, None, None]:
    """의존성: DB 세션 제공 (쓰기용 - 미설정 시 500)"""
    if engine is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=NOT_CONFIGURED_MESSAGE)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_optional_db() -> Generator[Session | None, None, None]:
    """의존성: 읽기 전용 조회용. DB 미설정 시 None (기본값으로 대체)"""
    if engine is None:
        yield None
        return
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
