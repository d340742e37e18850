"""
Tests for health, security headers and rate limiting.
"""
from fastapi.testclient import TestClient

from stichting.main import create_app


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_security_headers(client):
    response = client.get("/api/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"


def test_cors_allows_configured_origin(client):
    response = client.get("/api/health", headers={"Origin": "http://testserver"})
    assert response.headers["access-control-allow-origin"] == "http://testserver"


def test_rate_limit(settings, database):
    limited = settings.model_copy(update={"RATE_LIMIT_PER_MINUTE": 3})
    with TestClient(create_app(settings=limited, database=database)) as c:
        statuses = [c.get("/api/health").status_code for _ in range(5)]
    assert statuses == [200, 200, 200, 429, 429]


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert "message" in response.json()
