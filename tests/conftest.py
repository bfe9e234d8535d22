"""Pytest fixtures for sentiment-monitor tests."""

from datetime import datetime, timezone

import pytest

from sentiment_monitor.config.settings import get_settings
from sentiment_monitor.storage.schemas import Author, Comment

_ENV_VARS = (
    "API_KEYS",
    "HUGGINGFACE_API_TOKEN",
    "DEMO_MODE",
    "ENVIRONMENT",
    "TRACING_ENABLED",
    "SENTIMENT_SEED",
    "SENTIMENT_INFERENCE_URL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests independent of the host environment and the repo's data dir."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("PERSIST_ENABLED", "false")
    monkeypatch.setenv("SEED_PATH", str(tmp_path / "missing-seed.json"))
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    """Reference time used by date-sensitive tests."""
    return datetime(2026, 10, 19, 15, 0, 0, tzinfo=timezone.utc)


def _make_comment(
    comment_id: str,
    text: str = "Nice place",
    source: str = "google",
    label: str = "NEUTRAL",
    score: float = 0.5,
    **kwargs,
) -> Comment:
    """Helper to create a Comment with sensible defaults."""
    return Comment(
        id=comment_id,
        text=text,
        source=source,
        sentiment_label=label,
        sentiment_score=score,
        user_id=kwargs.pop("user_id", "user_1"),
        created_at=kwargs.pop(
            "created_at", datetime(2026, 10, 10, 12, 0, 0, tzinfo=timezone.utc)
        ),
        influence=kwargs.pop("influence", 5),
        **kwargs,
    )


@pytest.fixture
def make_comment():
    """Factory for comments with test defaults."""
    return _make_comment


@pytest.fixture
def sample_author() -> Author:
    return Author(
        id="author_1",
        name="Jane Reviewer",
        handle="@jane",
        followers=1500,
        platform="google",
    )


@pytest.fixture
def sample_comments() -> list[Comment]:
    """A small, varied comment set owned mostly by user_1."""
    return [
        _make_comment(
            "c1",
            text="Amazing coffee, great staff",
            source="google",
            label="POSITIVE",
            score=0.9,
            influence=8,
            country="US",
            lang="en",
            created_at=datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc),
        ),
        _make_comment(
            "c2",
            text="Terrible wait, rude cashier",
            source="facebook",
            label="NEGATIVE",
            score=0.1,
            influence=3,
            country="UK",
            lang="en",
            created_at=datetime(2026, 10, 17, 18, 30, tzinfo=timezone.utc),
            author_id="author_1",
        ),
        _make_comment(
            "c3",
            text="Opening hours changed",
            source="news",
            label="NEUTRAL",
            score=0.5,
            influence=None,
            country="CA",
            lang="fr",
            created_at=datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc),
        ),
        _make_comment(
            "c4",
            text="Undated import",
            source="google",
            label="POSITIVE",
            score=0.75,
            influence=10,
            country=None,
            lang=None,
            created_at=None,
        ),
        _make_comment(
            "c5",
            text="Someone else's feedback",
            source="google",
            label="POSITIVE",
            score=0.8,
            influence=7,
            user_id="user_2",
            created_at=datetime(2026, 10, 18, 10, 0, tzinfo=timezone.utc),
        ),
    ]
