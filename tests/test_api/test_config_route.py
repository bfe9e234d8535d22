"""Tests for GET/PUT /api/config."""


class TestGetConfig:
    def test_defaults_when_never_saved(self, client):
        resp = client.get("/api/config")

        assert resp.status_code == 200
        assert resp.json() == {
            "id": None,
            "userId": None,
            "huggingfaceToken": None,
            "demoMode": "true",
            "sentimentThreshold": 0.4,
        }


class TestUpdateConfig:
    def test_upsert_then_read(self, client):
        resp = client.put("/api/config", json={"huggingfaceToken": "hf_abc"})

        assert resp.status_code == 200
        saved = resp.json()
        assert saved["userId"] == "user_1"
        assert saved["huggingfaceToken"] == "hf_abc"
        assert saved["demoMode"] == "true"
        assert saved["id"] is not None
        assert client.get("/api/config").json() == saved

    def test_partial_update_merges(self, client):
        first = client.put("/api/config", json={
            "huggingfaceToken": "hf_abc",
            "demoMode": "false",
        }).json()

        second = client.put("/api/config", json={"sentimentThreshold": 0.65}).json()

        assert second["id"] == first["id"]
        assert second["huggingfaceToken"] == "hf_abc"
        assert second["demoMode"] == "false"
        assert second["sentimentThreshold"] == 0.65

    def test_empty_body_creates_defaults(self, client):
        saved = client.put("/api/config", json={}).json()
        assert saved["demoMode"] == "true"
        assert saved["sentimentThreshold"] == 0.4

    def test_invalid_threshold_type(self, client):
        resp = client.put("/api/config", json={"sentimentThreshold": "high"})
        assert resp.status_code == 422
