"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to lexiboard API"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    """Test API root endpoint."""
    response = client.get("/api/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "lexiboard API"
    assert data["version"] == "0.1.0"


def test_unknown_record_resource_is_a_validation_error(client: TestClient) -> None:
    """Only vocabulary, expressions and grammar are record resources."""
    response = client.get("/api/idioms")
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["type"] == "VALIDATION_ERROR"
    assert data["field"] == "resource"
