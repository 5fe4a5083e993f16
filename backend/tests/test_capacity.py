"""재고 API"""
from datetime import date

from app.models import DailyCapacity
from tests.conftest import make_order


def test_capacity_counts_orders(client, db_session):
    make_order(db_session, contact="0400000001", orderDates=["2024-06-03", "2024-06-04"])
    make_order(db_session, contact="0400000002", orderDates=["2024-06-04"])
    r = client.get("/api/capacity", params={"dates": "2024-06-04,2024-06-03,2024-06-05"})
    assert r.status_code == 200
    assert r.json() == [
        {"date": "2024-06-04", "max_capa": 30, "current_order_count": 2, "remaining": 28, "is_closed": False},
        {"date": "2024-06-03", "max_capa": 30, "current_order_count": 1, "remaining": 29, "is_closed": False},
        {"date": "2024-06-05", "max_capa": 30, "current_order_count": 0, "remaining": 30, "is_closed": False},
    ]


def test_capacity_requires_dates(client):
    r = client.get("/api/capacity")
    assert r.status_code == 400
    assert r.json() == {"error": "날짜가 필요합니다."}
    r = client.get("/api/capacity", params={"dates": "2024-06-03,bad"})
    assert r.status_code == 400


def test_next_week_capacity(client):
    r = client.get("/api/capacity/next-week")
    assert r.status_code == 200
    assert len(r.json()) == 5


def test_capacity_update_is_recorded_but_not_applied(client, db_session):
    r = client.post("/api/capacity", json={"date": "2024-06-03", "max_capa": 5, "is_closed": True})
    assert r.status_code == 200
    assert r.json()["max_capa"] == 30
    assert r.json()["is_closed"] is False
    row = db_session.get(DailyCapacity, date(2024, 6, 3))
    assert row.max_capa == 5
    assert row.is_closed is True


def test_capacity_update_requires_date(client):
    r = client.post("/api/capacity", json={"is_closed": True})
    assert r.status_code == 400
