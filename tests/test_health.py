"""
Test health and metrics endpoints
"""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient):
    """Test basic health check endpoint."""
    response = client.get("/health/")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "version" in data


def test_readiness_check(client: TestClient):
    """Test readiness endpoint."""
    response = client.get("/health/ready")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ready"
    assert data["services"]["database"] == "healthy"
    assert data["services"]["schema"] == "healthy"
    assert "leads" in data["modules"]


def test_liveness_check(client: TestClient):
    """Test liveness endpoint."""
    response = client.get("/health/live")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "alive"
    assert "uptime_seconds" in data


def test_metrics_endpoint(client: TestClient):
    """Requests are counted by route template."""
    client.get("/api/leads")

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text
    assert 'endpoint="/api/{module}"' in response.text
