"""Storage layer: record schemas, repository interface and in-memory backend."""

from sentiment_monitor.storage.persistence import SnapshotWriter, load_seed
from sentiment_monitor.storage.repository import InMemoryRepository, Repository
from sentiment_monitor.storage.schemas import (
    VALID_ORDERS,
    VALID_SOURCES,
    Author,
    Comment,
    CommentFilter,
    Snapshot,
    UserConfig,
)

__all__ = [
    "Author",
    "Comment",
    "CommentFilter",
    "InMemoryRepository",
    "Repository",
    "Snapshot",
    "SnapshotWriter",
    "UserConfig",
    "VALID_ORDERS",
    "VALID_SOURCES",
    "load_seed",
]
