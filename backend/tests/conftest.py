"""테스트 설정 - 인메모리 SQLite, get_db 의존성 교체"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.database import Base, get_db, get_optional_db
from app.main import app
from app.schemas.order import OrderCreate
from app.services.orders import create_order

MONDAY = date(2024, 6, 3)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_optional_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def small_capacity(monkeypatch):
    """최대 주문 수를 2로 줄여 재고 부족 상황 재현"""
    monkeypatch.setattr(get_settings(), "max_capa", 2)
    return 2


def order_payload(**overrides) -> dict:
    payload = {
        "name": "김철수",
        "contact": "0412 345 678",
        "location": "Kings Park",
        "orderDates": [MONDAY.isoformat()],
        "payment_method": "cash",
        "allergies": "",
        "is_weekly_order": False,
    }
    payload.update(overrides)
    return payload


def make_order(db, **overrides):
    return create_order(db, OrderCreate.model_validate(order_payload(**overrides)))
