"""Tests for observability middleware."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from luvvix_cache.core.middleware import ObservabilityMiddleware


@pytest.fixture
def app():
    """Create a test FastAPI app with middleware."""
    test_app = FastAPI()
    test_app.add_middleware(ObservabilityMiddleware)

    @test_app.get("/test")
    async def test_endpoint():
        return {"message": "ok"}

    @test_app.get("/error")
    async def error_endpoint():
        raise ValueError("Test error")

    return test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


def test_middleware_adds_request_id(client):
    response = client.get("/test")
    assert response.status_code == 200
    assert response.headers["x-request-id"]


def test_middleware_keeps_incoming_request_id(client):
    response = client.get("/test", headers={"X-Request-ID": "req-42"})
    assert response.headers["x-request-id"] == "req-42"


def test_middleware_adds_response_time(client):
    response = client.get("/test")
    assert int(response.headers["x-response-time-ms"]) >= 0


def _request_records(caplog):
    return [r for r in caplog.records if r.name == "luvvix_cache.core.middleware"]


def test_middleware_logs_request(client, caplog):
    with caplog.at_level(logging.INFO, logger="luvvix_cache.core.middleware"):
        client.get("/test", headers={"X-Request-ID": "req-7"})
    record = _request_records(caplog)[-1]
    assert record.path == "/test"
    assert record.method == "GET"
    assert record.status == 200
    assert record.request_id == "req-7"
    assert record.duration_ms >= 0


def test_middleware_handles_errors_gracefully(client, caplog):
    """Test that middleware logs failed requests and lets the error surface as 500."""
    with caplog.at_level(logging.INFO, logger="luvvix_cache.core.middleware"):
        response = client.get("/error")
    assert response.status_code == 500
    assert _request_records(caplog)[-1].status == "ERROR"
