"""Tests for GET /api/snapshots."""

from datetime import datetime, timedelta, timezone

import pytest


class TestSnapshots:
    @pytest.mark.parametrize("range_,days", [("1d", 1), ("7d", 7), ("30d", 30), (None, 30)])
    def test_range_controls_length(self, client, range_, days):
        params = {"range": range_} if range_ else {}
        resp = client.get("/api/snapshots", params=params)

        assert resp.status_code == 200
        assert len(resp.json()) == days

    def test_oldest_first_ending_today(self, client):
        data = client.get("/api/snapshots", params={"range": "7d"}).json()

        stamps = [datetime.fromisoformat(s["ts"]) for s in data]
        assert stamps == sorted(stamps)
        today = datetime.now(timezone.utc).date()
        assert stamps[-1].date() == today
        assert stamps[0].date() == today - timedelta(days=6)

    def test_camel_case_and_invariant(self, client):
        data = client.get("/api/snapshots", params={"range": "7d", "group": "week"}).json()

        for snap in data:
            assert {"avgScore", "userId", "mentions", "reach"} <= set(snap)
            assert snap["mentions"] == snap["pos"] + snap["neu"] + snap["neg"]
            assert snap["userId"] == "user_1"

    def test_new_comment_counted_today(self, client):
        client.post("/api/comments", json={"source": "manual", "text": "Hello there"})

        today = client.get("/api/snapshots", params={"range": "1d"}).json()[0]

        assert today["mentions"] >= 1
        assert today["reach"] >= 200
