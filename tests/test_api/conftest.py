# tests/test_api/conftest.py
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from nuggetbook.api.deps import get_books_client
from nuggetbook.api.main import create_app

@pytest.fixture
def app():
    return create_app()

@pytest.fixture
def books_client():
    """Stand-in for the metadata API client"""
    return Mock()

@pytest.fixture
def client(app, books_client):
    # The startup hook is skipped: tables come from the session database fixture
    app.dependency_overrides[get_books_client] = lambda: books_client
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def sign_up(client):
    """Register a user through the API and return its auth headers"""
    def _sign_up(email, password="secret123", display_name=None):
        response = client.post("/auth/sign-up", json={
            "email": email, "password": password, "display_name": display_name
        })
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return _sign_up

@pytest.fixture
def alice_headers(sign_up):
    return sign_up("alice@example.com", display_name="Alice")

@pytest.fixture
def bob_headers(sign_up):
    return sign_up("bob@example.com", display_name="Bob")
