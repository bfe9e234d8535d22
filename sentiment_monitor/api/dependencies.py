"""
Dependency injection for FastAPI endpoints.
"""

from fastapi import Depends

from sentiment_monitor.config.settings import get_settings
from sentiment_monitor.observability.metrics import get_metrics
from sentiment_monitor.sentiment.classifier import SentimentClassifier
from sentiment_monitor.sentiment.config import SentimentConfig
from sentiment_monitor.services.comment_service import CommentService
from sentiment_monitor.storage.persistence import SnapshotWriter, load_seed
from sentiment_monitor.storage.repository import InMemoryRepository, Repository

# Global service instances (initialized on first request)
_repository: InMemoryRepository | None = None
_classifier: SentimentClassifier | None = None


def create_repository() -> InMemoryRepository:
    """Build the repository selected by STORAGE_BACKEND, loading seed data."""
    settings = get_settings()

    authors, comments = load_seed(settings.seed_path)
    writer = SnapshotWriter(settings.data_dir) if settings.persist_enabled else None

    get_metrics().record_store_size(len(comments))
    return InMemoryRepository(authors=authors, comments=comments, writer=writer)


async def get_repository() -> Repository:
    """
    Get repository instance.

    Creates a singleton repository seeded from SEED_PATH.
    """
    global _repository

    if _repository is None:
        _repository = create_repository()

    return _repository


async def get_sentiment_classifier() -> SentimentClassifier:
    """Get sentiment classifier instance."""
    global _classifier

    if _classifier is None:
        _classifier = SentimentClassifier(config=SentimentConfig())

    return _classifier


async def get_comment_service(
    repository: Repository = Depends(get_repository),
    classifier: SentimentClassifier = Depends(get_sentiment_classifier),
) -> CommentService:
    """Get comment service bound to the current repository and classifier."""
    return CommentService(repository=repository, classifier=classifier)


async def cleanup_dependencies() -> None:
    """Cleanup global dependencies on shutdown."""
    global _repository, _classifier

    if _classifier is not None:
        await _classifier.close()
        _classifier = None

    if _repository is not None:
        await _repository.close()
        _repository = None
