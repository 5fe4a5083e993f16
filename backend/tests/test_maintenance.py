"""유지보수 작업: 재고 초기화, 일요일 날짜 수정, 정기 주문 날짜 정리"""
from datetime import date

from app.models import Customer, DailyCapacity, OrderSettlement
from app.services.maintenance import extend_weekly_orders, fix_sunday_dates, weekly_window
from tests.conftest import make_order


def _dates(order):
    return [s.date for s in order.settlements]


def test_reset_capacity(client, db_session):
    r = client.post("/api/admin/reset-capacity")
    assert r.json()["deleted_count"] == 0
    db_session.add_all([DailyCapacity(date=date(2024, 6, 3)), DailyCapacity(date=date(2024, 6, 4))])
    db_session.commit()
    r = client.post("/api/admin/reset-capacity")
    assert r.status_code == 200
    assert r.json()["deleted_count"] == 2
    assert db_session.query(DailyCapacity).count() == 0


def test_fix_sunday_dates(client, db_session):
    order = make_order(db_session, orderDates=["2024-06-03"])
    order.settlements.append(OrderSettlement(date=date(2024, 6, 2), is_settled=False))
    customer = db_session.get(Customer, order.customer_id)
    entry = dict(customer.orders[0])
    entry["settlements"] = [*entry["settlements"], {"date": "2024-06-02", "is_settled": False}]
    customer.orders = [entry]
    db_session.commit()

    r = client.post("/api/admin/fix-sunday-dates")
    assert r.status_code == 200
    assert r.json()["orders_fixed"] == 1
    assert r.json()["customers_fixed"] == 1
    assert r.json()["total_fixed"] == 2

    db_session.refresh(order)
    assert _dates(order) == [date(2024, 6, 3), date(2024, 5, 31)]
    mirror = db_session.get(Customer, order.customer_id).orders[0]["settlements"]
    assert [s["date"] for s in mirror] == ["2024-06-03", "2024-05-31"]

    # 재실행해도 변화 없음
    r = client.post("/api/admin/fix-sunday-dates")
    assert r.json()["total_fixed"] == 0


def test_fix_sunday_drops_duplicate_friday(db_session, client):
    order = make_order(db_session, orderDates=["2024-05-31"])
    order.settlements.append(OrderSettlement(date=date(2024, 6, 2), is_settled=False))
    db_session.commit()
    client.post("/api/admin/fix-sunday-dates")
    db_session.refresh(order)
    assert _dates(order) == [date(2024, 5, 31)]


def test_fix_sunday_keeps_existing_friday_in_order_and_mirror(db_session):
    """정산된 일요일 + 미정산 금요일: 양쪽 모두 기존 금요일(미정산)만 남음"""
    order = make_order(db_session, orderDates=["2024-06-03"])
    order.settlements.append(OrderSettlement(date=date(2024, 6, 2), is_settled=True))
    order.settlements.append(OrderSettlement(date=date(2024, 5, 31), is_settled=False))
    customer = db_session.get(Customer, order.customer_id)
    entry = dict(customer.orders[0])
    entry["settlements"] = [
        {"date": "2024-06-03", "is_settled": False},
        {"date": "2024-06-02", "is_settled": True},
        {"date": "2024-05-31", "is_settled": False},
    ]
    customer.orders = [entry]
    db_session.commit()

    counts = fix_sunday_dates(db_session)
    assert counts == (1, 1)

    db_session.refresh(order)
    expected = [("2024-06-03", False), ("2024-05-31", False)]
    assert [(s.date.isoformat(), s.is_settled) for s in order.settlements] == expected
    mirror = db_session.get(Customer, order.customer_id).orders[0]["settlements"]
    assert [(s["date"], s["is_settled"]) for s in mirror] == expected


def test_weekly_window():
    # 2024-06-05(수): 이번 주 월요일 06-03, 다음 주 월요일 06-10, 다다음 주 금요일 06-21
    assert weekly_window(date(2024, 6, 5), 2) == (date(2024, 6, 3), date(2024, 6, 10), date(2024, 6, 21))


def test_extend_weekly_orders(db_session):
    old = make_order(
        db_session,
        contact="0400000001",
        orderDates=["2024-05-20", "2024-05-22"],
        is_weekly_order=True,
    )
    single = make_order(db_session, contact="0400000002", orderDates=["2024-05-20"])

    counts = extend_weekly_orders(db_session, date(2024, 6, 5))
    assert counts.orders_updated == 1
    assert counts.customer_orders_updated == 1

    db_session.refresh(old)
    assert sorted(_dates(old)) == [
        date(2024, 6, 10),
        date(2024, 6, 12),
        date(2024, 6, 17),
        date(2024, 6, 19),
    ]
    db_session.refresh(single)
    assert _dates(single) == [date(2024, 5, 20)]
    mirror = db_session.get(Customer, old.customer_id).orders[0]["settlements"]
    assert sorted(s["date"] for s in mirror) == ["2024-06-10", "2024-06-12", "2024-06-17", "2024-06-19"]

    # 재실행 시 변경 없음
    assert extend_weekly_orders(db_session, date(2024, 6, 5)).orders_updated == 0


def test_extend_weekly_orders_keeps_this_week(db_session):
    order = make_order(db_session, orderDates=["2024-06-04"], is_weekly_order=True)
    extend_weekly_orders(db_session, date(2024, 6, 5))
    db_session.refresh(order)
    assert sorted(_dates(order)) == [date(2024, 6, 4), date(2024, 6, 11), date(2024, 6, 18)]


def test_extend_weekly_orders_skips_full_days(db_session, small_capacity):
    make_order(db_session, contact="0400000001", orderDates=["2024-06-17"])
    make_order(db_session, contact="0400000002", orderDates=["2024-06-17"])
    order = make_order(db_session, contact="0400000003", orderDates=["2024-06-03"], is_weekly_order=True)
    extend_weekly_orders(db_session, date(2024, 6, 5))
    db_session.refresh(order)
    assert sorted(_dates(order)) == [date(2024, 6, 3), date(2024, 6, 10)]


def test_extend_weekly_orders_endpoint(client):
    r = client.post("/api/admin/add-next-week-to-weekly-orders")
    assert r.status_code == 200
    assert r.json()["total_updated"] == 0
