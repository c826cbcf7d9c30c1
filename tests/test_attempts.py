from fastapi.testclient import TestClient

from deps.captcha import get_store
from generator import make_puzzle
from main import app

client = TestClient(app)


def test_attempts_require_key(monkeypatch):
    monkeypatch.setenv("CAPTCHA_API_KEY", "k")
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.get("/attempts/recent-list")
    assert r.status_code == 401


def test_validation_is_recorded(monkeypatch):
    monkeypatch.setenv("CAPTCHA_API_KEY", "k")
    token = get_store().create(make_puzzle(6, "*", 7))
    client.post("/validate", json={"token": token, "answer": "41"})

    r = client.get("/attempts/recent-list", headers={"x-api-key": "k"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["count"] >= 1
    row = next(i for i in body["items"] if i["token"] == token)
    assert row["outcome"] == "Incorrect"
    assert row["age_ms"] is not None and row["age_ms"] >= 0
    assert "answer" not in row

    r2 = client.get(f"/attempts/{row['id']}", headers={"x-api-key": "k"})
    assert r2.status_code == 200
    assert r2.json()["token"] == token


def test_unknown_token_recorded_without_age(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    client.post("/validate", json={"token": "never-issued", "answer": "1"})
    r = client.get("/attempts/recent-list", headers={"x-admin-token": "secret"})
    row = next(i for i in r.json()["items"] if i["token"] == "never-issued")
    assert row["outcome"] == "NotFound"
    assert row["age_ms"] is None


def test_attempt_not_found(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.get("/attempts/999999999", headers={"x-admin-token": "secret"})
    assert r.status_code == 404
