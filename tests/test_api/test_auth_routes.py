# tests/test_api/test_auth_routes.py
from unittest.mock import patch
from fastapi.testclient import TestClient

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_startup_creates_tables(app):
    with patch("nuggetbook.api.main.get_database") as get_database:
        with TestClient(app) as started:
            assert started.get("/health").status_code == 200
    get_database.return_value.init_db.assert_called_once_with()

def test_sign_up_and_me(client):
    response = client.post("/auth/sign-up", json={
        "email": "  New.Reader@Example.com ", "password": "secret123", "display_name": "Reader"
    })
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new.reader@example.com"
    assert body["display_name"] == "Reader"
    assert body["token_type"] == "bearer"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json() == {"user_id": body["user_id"], "email": "new.reader@example.com"}

def test_sign_up_duplicate_email(client, sign_up):
    sign_up("alice@example.com")
    response = client.post("/auth/sign-up", json={"email": "alice@example.com", "password": "another1"})
    assert response.status_code == 409
    assert response.json()["code"] == "duplicate"

def test_sign_up_short_password(client):
    response = client.post("/auth/sign-up", json={"email": "short@example.com", "password": "abc"})
    assert response.status_code == 400
    assert "at least 6" in response.json()["detail"]

def test_sign_in_echoes_return_to(client, sign_up):
    sign_up("alice@example.com")
    response = client.post("/auth/sign-in", json={
        "email": "alice@example.com", "password": "secret123", "return_to": "/share/abc123"
    })
    assert response.status_code == 200
    assert response.json()["return_to"] == "/share/abc123"

def test_sign_in_wrong_password(client, sign_up):
    sign_up("alice@example.com")
    response = client.post("/auth/sign-in", json={"email": "alice@example.com", "password": "wrong-one"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"

def test_sign_out_revokes_token(client, alice_headers):
    assert client.post("/auth/sign-out", headers=alice_headers).status_code == 204
    assert client.get("/auth/me", headers=alice_headers).status_code == 401

def test_anonymous_requests_rejected(client):
    for path in ("/auth/me", "/books", "/nuggets", "/shares", "/profile/stats"):
        response = client.get(path)
        assert response.status_code == 401, path
        assert response.headers["www-authenticate"] == "Bearer"

def test_malformed_authorization_header(client):
    response = client.get("/books", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
