"""Tests for seed loading and background JSON snapshots."""

import json

import pytest

from sentiment_monitor.storage.persistence import STORAGE_FILENAME, SnapshotWriter, load_seed
from sentiment_monitor.storage.repository import InMemoryRepository


class TestLoadSeed:
    def test_missing_file(self, tmp_path):
        assert load_seed(tmp_path / "nope.json") == ([], [])

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_seed(path) == ([], [])

    def test_skips_invalid_records(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({
            "authors": [{"id": "a1", "name": "Ana"}, {"id": "a2", "name": ""}],
            "comments": [
                {
                    "id": "c1",
                    "userId": "u1",
                    "source": "google",
                    "text": "Great",
                    "sentimentLabel": "POSITIVE",
                    "sentimentScore": 0.9,
                },
                {"id": "c2", "source": "google", "text": "no label"},
                {
                    "id": "c3",
                    "source": "carrier-pigeon",
                    "text": "Hi",
                    "sentimentLabel": "NEUTRAL",
                    "sentimentScore": 0.5,
                },
            ],
        }), encoding="utf-8")

        authors, comments = load_seed(path)

        assert [a.id for a in authors] == ["a1"]
        assert [c.id for c in comments] == ["c1"]
        assert comments[0].created_at is None

    @pytest.mark.parametrize("payload", [
        [],
        "just a string",
        {"comments": None, "authors": None},
        {"comments": {"id": "c1"}},
        {"comments": ["not-a-record", 42, None]},
        {"comments": [{
            "id": "c1",
            "source": "google",
            "text": 123,
            "sentimentLabel": "POSITIVE",
            "sentimentScore": 0.9,
        }]},
        {"authors": [{"id": "a1", "name": ["Ana"]}]},
    ])
    def test_wrong_structure_is_ignored(self, tmp_path, payload):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        authors, comments = load_seed(path)

        assert authors == []
        assert comments == []

    def test_valid_records_survive_bad_neighbours(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({
            "comments": [
                "garbage",
                {
                    "id": "ok",
                    "source": "news",
                    "text": "Reopened",
                    "sentimentLabel": "NEUTRAL",
                    "sentimentScore": 0.5,
                },
            ],
        }), encoding="utf-8")

        _, comments = load_seed(path)

        assert [c.id for c in comments] == ["ok"]

    def test_missing_lang_and_country_get_defaults(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({
            "comments": [{
                "id": "c1",
                "source": "google",
                "text": "Nice",
                "sentimentLabel": "POSITIVE",
                "sentimentScore": 0.8,
            }],
        }), encoding="utf-8")

        _, comments = load_seed(path)

        assert (comments[0].lang, comments[0].country) == ("en", "US")

    def test_bundled_seed_file_loads(self):
        from pathlib import Path

        seed = Path(__file__).resolve().parents[2] / "data" / "seed.json"
        authors, comments = load_seed(seed)
        assert len(authors) == 3
        assert len(comments) == 4
        assert all(c.user_id == "dev-mode" for c in comments)


class TestSnapshotWriter:
    @pytest.mark.asyncio
    async def test_writes_payload(self, tmp_path):
        writer = SnapshotWriter(tmp_path / "data")
        writer.schedule({"comments": [], "authors": [{"id": "a1"}], "configs": []})
        await writer.drain()

        assert writer.path == tmp_path / "data" / STORAGE_FILENAME
        data = json.loads(writer.path.read_text(encoding="utf-8"))
        assert data["authors"] == [{"id": "a1"}]

    @pytest.mark.asyncio
    async def test_last_scheduled_payload_wins(self, tmp_path):
        writer = SnapshotWriter(tmp_path)
        for i in range(5):
            writer.schedule({"n": i})
        await writer.drain()

        assert json.loads(writer.path.read_text(encoding="utf-8")) == {"n": 4}

    @pytest.mark.asyncio
    async def test_write_failure_is_swallowed(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        writer = SnapshotWriter(blocker / "data")

        writer.schedule({"comments": []})
        await writer.drain()

        assert not writer.path.exists()

    @pytest.mark.asyncio
    async def test_repository_mutations_are_persisted(self, tmp_path, make_comment):
        writer = SnapshotWriter(tmp_path)
        repo = InMemoryRepository(writer=writer)

        created = await repo.create_comment(make_comment("draft"))
        await repo.update_config("u1", demo_mode="false")
        await repo.close()

        data = json.loads(writer.path.read_text(encoding="utf-8"))
        assert [c["id"] for c in data["comments"]] == [created.id]
        assert data["configs"][0]["demoMode"] == "false"
