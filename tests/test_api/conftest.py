"""Shared fixtures for API tests."""

import random

import pytest
from fastapi.testclient import TestClient

from sentiment_monitor.api.app import create_app
from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_repository, get_sentiment_classifier
from sentiment_monitor.sentiment.classifier import SentimentClassifier
from sentiment_monitor.sentiment.config import SentimentConfig
from sentiment_monitor.storage.repository import InMemoryRepository

INFERENCE_URL = "https://inference.test/models/sentiment"


@pytest.fixture
def repo(sample_comments, sample_author):
    """In-memory repository seeded with the shared sample data."""
    return InMemoryRepository(authors=[sample_author], comments=sample_comments)


@pytest.fixture
def classifier():
    """Seeded classifier pointing at a mockable inference URL."""
    return SentimentClassifier(
        config=SentimentConfig(inference_url=INFERENCE_URL),
        rng=random.Random(42),
    )


@pytest.fixture
def client(repo, classifier):
    """FastAPI TestClient acting as user_1."""
    app = create_app()

    app.dependency_overrides[verify_api_key] = lambda: "user_1"
    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_sentiment_classifier] = lambda: classifier

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
