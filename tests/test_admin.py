from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_admin_purge_unauthorized(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/purge")
    assert r.status_code == 200 and r.json()["ok"] is False


def test_admin_purge_not_configured(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.post("/admin/purge", headers={"x-admin-token": "secret"})
    assert r.json()["ok"] is False


def test_admin_purge_ok(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/purge", headers={"x-admin-token": "secret"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert isinstance(body["count"], int) and isinstance(body["active"], int)
