"""Smoke tests - API 기본 동작 확인"""
from app import database
from app.database import get_db, get_optional_db
from app.main import app


def test_health(client):
    """헬스체크"""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_order_returns_error_body(client):
    r = client.get("/api/orders/9999")
    assert r.status_code == 404
    assert r.json() == {"error": "주문을 찾을 수 없습니다."}


def test_validation_error_is_400(client):
    """잘못된 수령 장소 -> 400 + error"""
    r = client.post("/api/orders", json={"name": "a", "location": "Nowhere"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_notice_empty(client):
    r = client.get("/api/notices")
    assert r.status_code == 200
    assert r.json() is None


def test_without_database_reads_degrade_and_writes_fail(monkeypatch):
    """DB 미설정: 재고 조회는 기본값, 쓰기는 500"""
    monkeypatch.setattr(database, "engine", None)
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_optional_db, None)
    from fastapi.testclient import TestClient

    c = TestClient(app)
    r = c.get("/api/capacity", params={"dates": "2024-06-03,2024-06-04"})
    assert r.status_code == 200
    body = r.json()
    assert [x["date"] for x in body] == ["2024-06-03", "2024-06-04"]
    assert all(x["max_capa"] == 30 and x["current_order_count"] == 0 and x["remaining"] == 30 for x in body)

    r = c.get("/api/notices")
    assert r.status_code == 200
    assert r.json() is None

    r = c.post("/api/orders", json={"name": "a"})
    assert r.status_code == 500
    assert "DATABASE_URL" in r.json()["error"]
