"""
Tests for application wiring: health probes, request IDs, API prefix.
"""

import structlog
from fastapi.testclient import TestClient

from backend.app import error_handlers
from backend.app.database import get_db
from backend.app.middleware.request_id import _incoming_request_id
from core.db import db
from core.logging import RequestLoggingMiddleware


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_readiness_reports_database(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": True}}


def test_readiness_when_database_down(client, monkeypatch):
    monkeypatch.setattr(
        db,
        "health_check",
        lambda: {"healthy": False, "latency_ms": 0, "error": "connection refused"},
    )

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_request_id_is_generated(client):
    response = client.get("/health")

    assert response.headers["x-request-id"]


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "trace-123"})

    assert response.headers["x-request-id"] == "trace-123"


def test_malformed_request_id_is_replaced(client):
    response = client.get("/health", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["x-request-id"] != "bad id with spaces"



def test_request_id_with_trailing_newline_is_rejected():
    scope = {"headers": [(b"x-request-id", b"trace-1\n")]}

    assert _incoming_request_id(scope) is None
    assert _incoming_request_id({"headers": [(b"x-request-id", b"trace-1")]}) == "trace-1"


class _ContextRecorder:
    """Stands in for a logger and keeps the request_id bound at each call."""

    def __init__(self):
        self.records = []

    def _record(self, event, **kwargs):
        context = structlog.contextvars.get_contextvars()
        self.records.append((event, kwargs.get("request_id", context.get("request_id"))))

    info = warning = error = exception = _record


def test_request_logs_carry_request_id(client, monkeypatch):
    recorder = _ContextRecorder()
    monkeypatch.setattr(RequestLoggingMiddleware, "logger", property(lambda self: recorder))

    client.get("/health", headers={"X-Request-ID": "trace-1"})

    assert ("request_started", "trace-1") in recorder.records
    assert ("request_complete", "trace-1") in recorder.records


def test_unhandled_error_is_logged_with_request_id(client, monkeypatch):
    recorder = _ContextRecorder()
    monkeypatch.setattr(error_handlers, "logger", recorder)

    @client.app.get("/boom")
    def boom():
        raise RuntimeError("kaput")

    response = TestClient(client.app, raise_server_exceptions=False).get(
        "/boom", headers={"X-Request-ID": "trace-2"}
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error", "status_code": 500}
    assert ("unhandled_exception", "trace-2") in recorder.records


def test_unknown_route_uses_error_body(client):
    response = client.get("/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found", "status_code": 404}


def test_wrong_method_uses_error_body(client):
    response = client.delete("/v1/attributes")

    assert response.status_code == 405
    assert response.json() == {"detail": "Method Not Allowed", "status_code": 405}


def test_api_prefix_is_applied(test_db, monkeypatch):
    from backend.app import main

    _, TestingSessionLocal, _ = test_db
    monkeypatch.setattr(main.settings, "api_prefix", "/api")
    app = main.create_app()

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    prefixed = TestClient(app)

    assert prefixed.get("/api/v1/attributes").status_code == 200
    assert prefixed.get("/api/v1/categories/shoes/attributes").status_code == 200
    assert prefixed.get("/v1/attributes").status_code == 404
    assert prefixed.get("/health").status_code == 200
