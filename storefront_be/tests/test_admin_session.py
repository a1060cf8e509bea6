"""
Tests for the admin login, logout and session endpoints
"""

from datetime import timedelta

from fastapi.testclient import TestClient
from jose import jwt
from werkzeug.security import generate_password_hash

from app.config import get_settings
from app.main import app
from app.utils.security import create_admin_token, decode_admin_token, verify_admin_password

ADMIN_PASSWORD = "s3cret-admin"


def test_session_is_false_without_login(client):
    assert client.get("/api/admin/session").json() == {"isAdmin": False}


def test_login_sets_session_cookie(client):
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert get_settings().ADMIN_COOKIE_NAME in resp.cookies
    assert client.get("/api/admin/session").json() == {"isAdmin": True}


def test_wrong_password_is_rejected(client):
    resp = client.post("/api/admin/login", json={"password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid password"}
    assert client.get("/api/admin/session").json() == {"isAdmin": False}


def test_empty_password_is_rejected(client):
    assert client.post("/api/admin/login", json={}).status_code == 401


def test_login_without_configured_secret(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "ADMIN_PASSWORD", None)
    monkeypatch.setattr(get_settings(), "ADMIN_PASSWORD_HASH", None)
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Admin password not configured"}


def test_precomputed_hash_takes_precedence(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "ADMIN_PASSWORD_HASH", generate_password_hash("other-secret"))
    assert verify_admin_password("other-secret")
    assert not verify_admin_password(ADMIN_PASSWORD)
    assert client.post("/api/admin/login", json={"password": "other-secret"}).status_code == 200


def test_logout_revokes_the_token(admin_client):
    token = admin_client.cookies.get(get_settings().ADMIN_COOKIE_NAME)

    resp = admin_client.post("/api/admin/logout")
    assert resp.json() == {"success": True}
    assert admin_client.get("/api/admin/session").json() == {"isAdmin": False}

    # The old token stays dead even when replayed as a bearer header
    other = TestClient(app)
    headers = {"Authorization": f"Bearer {token}"}
    assert other.get("/api/admin/session", headers=headers).json() == {"isAdmin": False}
    assert other.post("/api/categories", json={"nameAr": "x"}, headers=headers).status_code == 401


def test_logout_without_session_still_succeeds(client):
    assert client.post("/api/admin/logout").json() == {"success": True}


def test_bearer_token_is_accepted(client):
    headers = {"Authorization": f"Bearer {create_admin_token()}"}
    assert client.get("/api/admin/session", headers=headers).json() == {"isAdmin": True}
    assert client.post("/api/categories", json={"nameAr": "x"}, headers=headers).status_code == 201


def test_expired_token_is_refused(client):
    headers = {"Authorization": f"Bearer {create_admin_token(timedelta(seconds=-5))}"}
    assert client.get("/api/admin/session", headers=headers).json() == {"isAdmin": False}


def test_token_signed_with_other_key_is_refused(client):
    forged = jwt.encode({"sub": "admin", "jti": "abc"}, "not-the-key", algorithm="HS256")
    assert decode_admin_token(forged) is None
    headers = {"Authorization": f"Bearer {forged}"}
    assert client.post("/api/banners", json={"imageUrl": "/x.png"}, headers=headers).status_code == 401


def test_token_with_other_subject_is_refused():
    settings = get_settings()
    token = jwt.encode({"sub": "someone", "jti": "abc"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_admin_token(token) is None


def test_stale_cookie_does_not_hide_bearer_token(client):
    cookie = f"{get_settings().ADMIN_COOKIE_NAME}=garbage"
    headers = {"Cookie": cookie, "Authorization": f"Bearer {create_admin_token()}"}
    assert client.get("/api/admin/session", headers=headers).json() == {"isAdmin": True}
    assert client.get("/api/admin/session", headers={"Cookie": cookie}).json() == {"isAdmin": False}
