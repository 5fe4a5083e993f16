"""초기 DB 설정 - 테이블 생성(마이그레이션 미사용 시) + 기본 공지 등록"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select
from app.database import Base, SessionLocal, engine
from app.models import Notice


def main():
    if engine is None:
        print("DATABASE_URL이 설정되지 않았습니다.")
        sys.exit(1)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing = db.execute(select(Notice)).scalars().first()
        if existing:
            print("공지가 이미 존재합니다.")
            return
        db.add(
            Notice(
                title="주문 안내",
                content="다음 주 도시락 주문은 요일별 30개 한정입니다. 정기 주문은 매주 같은 요일로 자동 연장됩니다.",
                is_active=True,
            )
        )
        db.commit()
        print("테이블 생성 및 기본 공지 등록 완료")
    finally:
        db.close()


if __name__ == "__main__":
    main()
