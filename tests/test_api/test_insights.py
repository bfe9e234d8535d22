"""Tests for suggestions, topic breakdown, geo and report endpoints."""

import pytest


class TestSuggestions:
    def test_all(self, client):
        data = client.get("/api/suggestions").json()
        assert len(data) == 6
        assert {s["category"] for s in data} == {"POSITIVE", "NEUTRAL", "NEGATIVE"}

    def test_filter_by_category(self, client):
        data = client.get("/api/suggestions", params={"category": "NEGATIVE"}).json()
        assert [s["title"] for s in data] == ["Immediate Response", "Process Improvement"]

    def test_unknown_category_is_empty(self, client):
        assert client.get("/api/suggestions", params={"category": "MIXED"}).json() == []


def test_topic_breakdown(client):
    data = client.get("/api/topic-breakdown").json()
    assert data[0] == {"label": "Service Quality", "count": 45, "score": 0.82}
    assert len(data) == 6


def test_geo(client):
    data = client.get("/api/geo").json()
    assert {g["country"] for g in data} == {"US", "UK", "CA", "AU", "IN"}
    assert data[0] == {"country": "US", "mentions": 342, "reach": 15600, "interactions": 1240}


class TestReports:
    @pytest.mark.parametrize("kind,url", [
        ("pdf", "/api/download/report.pdf"),
        ("excel", "/api/download/report.xlsx"),
        ("infographic", "/api/download/infographic.png"),
    ])
    def test_known_kinds(self, client, kind, url):
        resp = client.post(f"/api/report/{kind}")

        assert resp.status_code == 200
        assert resp.json()["downloadUrl"] == url
        assert resp.json()["message"]

    def test_unknown_kind(self, client):
        resp = client.post("/api/report/powerpoint")
        assert resp.status_code == 404
