"""관리자 대시보드 요약"""
from datetime import date, datetime, timezone

from app.services.summary import get_weekly_summary
from tests.conftest import make_order

WEDNESDAY = date(2024, 6, 5)


def _created_at(db, order, when: datetime):
    order.created_at = when
    db.commit()


def test_weekly_summary_counts(db_session):
    a = make_order(
        db_session, contact="0400000001", location="Kings Park", orderDates=["2024-06-03", "2024-06-05"]
    )
    b = make_order(db_session, contact="0400000002", location="Eastern Creek", orderDates=["2024-06-04"])
    old = make_order(db_session, contact="0400000003", orderDates=["2024-06-05"])
    _created_at(db_session, a, datetime(2024, 6, 3, 9, 0))
    _created_at(db_session, b, datetime(2024, 6, 4, 9, 0))
    _created_at(db_session, old, datetime(2024, 5, 29, 9, 0))

    summary = get_weekly_summary(db_session, WEDNESDAY)
    assert summary.total_orders == 2
    assert summary.expected_revenue == 2
    by_day = {d.day: d.count for d in summary.orders_by_day}
    assert list(by_day) == ["월", "화", "수", "목", "금"]
    assert by_day == {"월": 1, "화": 1, "수": 1, "목": 0, "금": 0}
    assert summary.today_delivery.total == 1
    assert summary.today_delivery.kings_park == 1
    assert summary.today_delivery.eastern_creek == 0


def test_weekly_summary_uses_business_timezone(db_session):
    """월요일 08:00(시드니) 주문은 UTC로 일요일 22:00이지만 이번 주에 포함"""
    order = make_order(db_session, contact="0400000001", orderDates=["2024-06-03"])
    _created_at(db_session, order, datetime(2024, 6, 2, 22, 0, tzinfo=timezone.utc))

    summary = get_weekly_summary(db_session, date(2024, 6, 3))
    assert summary.total_orders == 1
    assert summary.today_delivery.total == 1


def test_summary_endpoint(client):
    r = client.get("/api/admin/summary")
    assert r.status_code == 200
    body = r.json()
    assert body["total_orders"] == 0
    assert len(body["orders_by_day"]) == 5
    assert body["today_delivery"] == {"total": 0, "kings_park": 0, "eastern_creek": 0}
