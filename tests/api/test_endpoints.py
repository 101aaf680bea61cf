"""Test API endpoints."""

import pytest
from fastapi.testclient import TestClient

from luvvix_cache.api.app import create_app
from luvvix_cache.config.settings import Settings
from luvvix_cache.core.errors import InvalidConfiguration


@pytest.fixture
def client():
    settings = Settings(cache_default_ttl_ms="1000", cache_max_size="3")
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_health_endpoint(client):
    """Test /health endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "luvvix-cache"


def test_health_has_request_id(client):
    """Test that responses include X-Request-ID header."""
    response = client.get("/health")
    assert "x-request-id" in response.headers


def test_request_id_is_propagated(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_metrics_endpoint(client):
    """Test /metrics reflects cache activity."""
    ai = client.app.state.ai_cache
    ai.set_response("hello", "world")
    ai.get_response("hello")
    ai.get_response("unknown")

    response = client.get("/metrics")
    assert response.status_code == 200
    data = response.json()
    assert data["hits"] == 1
    assert data["misses"] == 1
    assert data["hit_rate"] == 0.5
    assert data["size"] == 1
    assert data["max_size"] == 3


def test_cleanup_endpoint(client):
    cache = client.app.state.cache
    cache.set("stale", 1, ttl=0)
    cache.set("fresh", 2)
    response = client.post("/cache/cleanup")
    assert response.status_code == 200
    assert response.json() == {"removed": 1}
    assert cache.keys() == ["fresh"]


def test_clear_endpoint(client):
    cache = client.app.state.cache
    cache.set("a", 1)
    cache.get("a")
    response = client.delete("/cache")
    assert response.json() == {"cleared": True}
    assert cache.size == 0
    assert cache.stats.hits == 0


def test_sweeper_lifecycle():
    app = create_app(Settings())
    with TestClient(app):
        sweeper = app.state.sweeper
        assert sweeper.running is True
    assert sweeper.running is False


def test_create_app_rejects_bad_log_level():
    with pytest.raises(InvalidConfiguration):
        create_app(Settings(log_level="verbose"))
