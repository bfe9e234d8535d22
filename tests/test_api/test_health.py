"""Tests for health, metrics, root and request-id middleware."""

import re

from fastapi.testclient import TestClient

from sentiment_monitor.api.app import create_app

# UUID v4 regex pattern
UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["storage_backend"] == "memory"
        assert data["comment_count"] == 5
        assert data["classifier_mode"] == "heuristic"

    def test_health_remote_mode(self, client, monkeypatch):
        from sentiment_monitor.config.settings import get_settings

        monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "hf_server")
        get_settings.cache_clear()

        assert client.get("/health").json()["classifier_mode"] == "remote"

    def test_health_without_overrides_uses_seed_path(self):
        # Seed path points at a missing file, so the store starts empty
        with TestClient(create_app()) as c:
            data = c.get("/health").json()
        assert data["comment_count"] == 0


def test_metrics_endpoint(client):
    client.post("/api/analyze", json={"text": "Amazing"})

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert "sentiment_monitor_classifications_total" in resp.text


def test_root(client):
    assert client.get("/").json()["service"] == "Sentiment Monitor API"


class TestRequestIdMiddleware:
    def test_generates_uuid_when_no_header(self, client):
        request_id = client.get("/health").headers.get("X-Request-ID")
        assert request_id is not None
        assert UUID_RE.match(request_id), f"Expected UUID v4, got: {request_id}"

    def test_echoes_custom_request_id(self, client):
        resp = client.get("/api/geo", headers={"X-Request-ID": "custom-id-123"})
        assert resp.headers.get("X-Request-ID") == "custom-id-123"

    def test_echoes_correlation_id(self, client):
        resp = client.get("/health", headers={"X-Correlation-ID": "corr-456"})
        assert resp.headers.get("X-Request-ID") == "corr-456"


def test_metrics_can_be_disabled(monkeypatch):
    from sentiment_monitor.config.settings import get_settings

    monkeypatch.setenv("METRICS_ENABLED", "false")
    get_settings.cache_clear()

    with TestClient(create_app()) as c:
        assert c.get("/metrics").status_code == 404
