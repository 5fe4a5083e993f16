"""고객 API"""
from tests.conftest import make_order


def test_list_customers(client, db_session):
    make_order(db_session, contact="0400000001", name="가")
    make_order(db_session, contact="0400000002", name="나")
    make_order(db_session, contact="0400000001", name="가", orderDates=["2024-06-04"])
    r = client.get("/api/customers")
    assert r.status_code == 200
    by_contact = {c["contact"]: c for c in r.json()}
    assert set(by_contact) == {"0400000001", "0400000002"}
    assert by_contact["0400000001"]["total_orders"] == 2
    assert by_contact["0400000002"]["is_blacklisted"] is False


def test_customer_by_contact(client, db_session):
    order = make_order(db_session, contact="0400000001", is_weekly_order=True)
    r = client.get("/api/customers/by-contact", params={"contact": "0400000001"})
    assert r.status_code == 200
    body = r.json()
    assert body["is_weekly_order"] is True
    assert body["orders"][0]["order_id"] == order.id
    assert [s["date"] for s in body["orders"][0]["settlements"]] == ["2024-06-03", "2024-06-10"]

    r = client.get("/api/customers/by-contact", params={"contact": "0499999999"})
    assert r.status_code == 200
    assert r.json() is None

    r = client.get("/api/customers/by-contact")
    assert r.status_code == 400


def test_blacklist_toggle(client, db_session):
    order = make_order(db_session)
    r = client.patch(f"/api/customers/{order.customer_id}", json={"is_blacklisted": True})
    assert r.status_code == 200
    assert r.json()["is_blacklisted"] is True
    r = client.patch(f"/api/customers/{order.customer_id}", json={"is_blacklisted": False})
    assert r.json()["is_blacklisted"] is False

    r = client.patch("/api/customers/9999", json={"is_blacklisted": True})
    assert r.status_code == 404
    assert r.json() == {"error": "고객을 찾을 수 없습니다."}


def test_customer_by_contact_weekly_days(client, db_session):
    make_order(db_session, contact="0400000001", is_weekly_order=True, orderDates=["2024-06-05"])
    make_order(db_session, contact="0400000001", is_weekly_order=True, orderDates=["2024-06-03"])
    make_order(db_session, contact="0400000001", orderDates=["2024-06-07"])
    body = client.get("/api/customers/by-contact", params={"contact": "0400000001"}).json()
    assert body["weekly_order_days"] == ["월", "수"]

    listed = client.get("/api/customers").json()
    assert listed[0]["weekly_order_days"] == []
