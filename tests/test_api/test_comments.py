"""Tests for comment REST API endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from sentiment_monitor.api.app import create_app
from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_repository
from sentiment_monitor.storage.repository import Repository


# ── GET /api/comments ───────────────────────────────────


class TestListComments:
    """Tests for the list comments endpoint."""

    def test_lists_callers_comments_recent_first(self, client):
        resp = client.get("/api/comments")

        assert resp.status_code == 200
        data = resp.json()
        assert [c["id"] for c in data] == ["c3", "c1", "c2", "c4"]
        assert all(c["userId"] == "user_1" for c in data)

    def test_camel_case_fields(self, client):
        item = client.get("/api/comments").json()[0]
        assert set(item) == {
            "id", "userId", "source", "authorId", "text", "lang", "country",
            "createdAt", "sentimentLabel", "sentimentScore", "influence",
        }

    def test_repeated_source_params(self, client):
        resp = client.get("/api/comments?source=facebook&source=news")
        assert {c["id"] for c in resp.json()} == {"c2", "c3"}

    def test_sentiment_and_min_influence(self, client):
        resp = client.get("/api/comments", params={
            "sentiment": "POSITIVE",
            "minInfluence": 9,
        })
        assert [c["id"] for c in resp.json()] == ["c4"]

    def test_exclusions(self, client):
        resp = client.get(
            "/api/comments?countriesExclude=US&countriesExclude=UK&languagesExclude=fr"
        )
        assert [c["id"] for c in resp.json()] == ["c4"]

    def test_query_matches_author_name(self, client):
        resp = client.get("/api/comments", params={"q": "Reviewer"})
        assert [c["id"] for c in resp.json()] == ["c2"]

    def test_date_range(self, client):
        resp = client.get("/api/comments", params={
            "dateFrom": "2026-10-18",
            "dateTo": "2026-10-18T23:59:59Z",
        })
        assert [c["id"] for c in resp.json()] == ["c1"]

    def test_order_top(self, client):
        resp = client.get("/api/comments", params={"order": "top"})
        assert [c["id"] for c in resp.json()] == ["c4", "c1", "c2", "c3"]

    def test_invalid_date_returns_422(self, client):
        resp = client.get("/api/comments", params={"dateFrom": "last tuesday"})
        assert resp.status_code == 422
        assert "dateFrom" in resp.json()["detail"]

    def test_negative_min_influence_returns_422(self, client):
        resp = client.get("/api/comments", params={"minInfluence": -1})
        assert resp.status_code == 422

    def test_repository_error_returns_500(self):
        failing_repo = AsyncMock(spec=Repository)
        failing_repo.list_comments = AsyncMock(side_effect=RuntimeError("disk on fire"))

        app = create_app()
        app.dependency_overrides[verify_api_key] = lambda: "user_1"
        app.dependency_overrides[get_repository] = lambda: failing_repo

        with TestClient(app) as c:
            resp = c.get("/api/comments")

        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to fetch comments"
        assert "disk on fire" not in resp.text


# ── POST /api/comments ──────────────────────────────────


class TestCreateComment:
    """Tests for the create comment endpoint."""

    def test_create_positive(self, client):
        resp = client.post("/api/comments", json={
            "source": "google",
            "text": "Amazing service! Loved it!",
        })

        assert resp.status_code == 201
        data = resp.json()
        assert data["sentimentLabel"] == "POSITIVE"
        assert 0.7 <= data["sentimentScore"] < 1.0
        assert data["userId"] == "user_1"
        assert data["lang"] == "en"
        assert data["country"] == "US"
        assert data["createdAt"] is not None
        assert 2 <= data["influence"] <= 9

    def test_created_comment_is_listed(self, client):
        created = client.post("/api/comments", json={
            "source": "instagram",
            "authorId": "author_1",
            "text": "Terrible and rude staff",
            "lang": "es",
            "country": "MX",
        }).json()

        listed = client.get("/api/comments", params={"source": "instagram"}).json()

        assert listed == [created]
        assert created["sentimentLabel"] == "NEGATIVE"
        assert created["authorId"] == "author_1"

    def test_invalid_source(self, client):
        resp = client.post("/api/comments", json={"source": "fax", "text": "Hi"})
        assert resp.status_code == 422
        assert "Invalid source" in resp.json()["detail"]

    @pytest.mark.parametrize("payload", [
        {"source": "google"},
        {"source": "google", "text": ""},
        {"text": "no source"},
    ])
    def test_missing_fields(self, client, payload):
        resp = client.post("/api/comments", json=payload)
        assert resp.status_code == 422

    def test_whitespace_text(self, client):
        resp = client.post("/api/comments", json={"source": "google", "text": "   "})
        assert resp.status_code == 422

    def test_nothing_stored_on_validation_error(self, client):
        client.post("/api/comments", json={"source": "fax", "text": "Hi"})
        assert len(client.get("/api/comments").json()) == 4
