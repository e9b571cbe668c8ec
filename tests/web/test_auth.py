"""Tests for bearer-token auth and health."""

from web.app import app
from web.auth import get_current_user


class TestAuth:
    def test_health_is_public(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_missing_token(self, client):
        assert client.get("/api/goals").status_code in (401, 403)

    def test_bad_signature(self, client, make_token):
        token = make_token({"sub": "user-123"}, secret="wrong-secret")
        resp = client.get("/api/goals", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401

    def test_garbage_token(self, client):
        resp = client.get("/api/goals", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 401

    def test_missing_sub(self, client, make_token):
        token = make_token({"email": "a@example.com"})
        resp = client.get("/api/goals", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert "missing sub" in resp.json()["detail"]

    def test_secret_not_configured(self, client, auth_headers, monkeypatch):
        monkeypatch.delenv("FLOWDESK_JWT_SECRET")
        assert client.get("/api/goals", headers=auth_headers).status_code == 500

    def test_valid_token(self, client, auth_headers):
        assert client.get("/api/goals", headers=auth_headers).status_code == 200

    def test_current_user_override(self, client):
        app.dependency_overrides[get_current_user] = lambda: {"id": "someone", "email": None, "name": None}
        assert client.get("/api/goals").json() == []
