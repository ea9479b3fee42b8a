"""Tests for authentication endpoints."""

import httpx
from fastapi import status
from fastapi.testclient import TestClient


def _login(
    client: TestClient, username: str = "admin", password: str = "admin-password"
) -> httpx.Response:
    return client.post("/api/auth/login", data={"username": username, "password": password})


class TestLogin:
    """Test suite for POST /auth/login endpoint."""

    def test_login_success(self, client: TestClient) -> None:
        response = _login(client)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["access_token"]
        assert data["token_type"] == "bearer"

    def test_token_grants_admin(self, client: TestClient) -> None:
        """The issued token works for admin-only writes."""
        token = _login(client).json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}

        me = client.get("/api/auth/me", headers=headers)
        created = client.post(
            "/api/boards", json={"name": "Work", "type": "vocabulary"}, headers=headers
        )

        assert me.status_code == status.HTTP_200_OK
        assert me.json() == {"username": "admin", "isAdmin": True}
        assert created.status_code == status.HTTP_201_CREATED

    def test_login_wrong_password(self, client: TestClient) -> None:
        response = _login(client, password="wrong")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        data = response.json()
        assert data["type"] == "UNAUTHORIZED_ERROR"
        assert data["error"] == "Incorrect username or password"

    def test_login_wrong_username(self, client: TestClient) -> None:
        response = _login(client, username="someone")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_is_rate_limited(self, client: TestClient) -> None:
        """Five attempts a minute per address; the sixth is refused."""
        for _ in range(5):
            assert _login(client, password="wrong").status_code == status.HTTP_401_UNAUTHORIZED

        response = _login(client)

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS


class TestMe:
    """Test suite for GET /auth/me endpoint."""

    def test_me_without_token(self, client: TestClient) -> None:
        response = client.get("/api/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["type"] == "UNAUTHORIZED_ERROR"

    def test_me_with_invalid_token(self, client: TestClient) -> None:
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_as_viewer(self, client: TestClient, viewer_headers: dict[str, str]) -> None:
        response = client.get("/api/auth/me", headers=viewer_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"username": "reader", "isAdmin": False}
