"""API smoke tests for service metadata endpoints."""

from fastapi.testclient import TestClient


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client: TestClient):
    data = client.get("/").json()

    assert data["docs"] == "/docs"
    assert "version" in data
