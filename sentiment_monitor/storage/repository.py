"""
Repository for comments, authors and per-user configuration.

``Repository`` is the interface the API depends on; ``InMemoryRepository``
keeps everything in dicts guarded by a single asyncio lock and optionally
mirrors each mutation to a JSON snapshot.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime

import structlog

from sentiment_monitor.snapshots.aggregation import SnapshotAggregator
from sentiment_monitor.storage.persistence import SnapshotWriter
from sentiment_monitor.storage.schemas import (
    Author,
    Comment,
    CommentFilter,
    Snapshot,
    UserConfig,
    ensure_utc,
    new_id,
    utcnow,
)

logger = structlog.get_logger(__name__)

# Sort key for comments without created_at: earlier than any real timestamp
_MISSING_CREATED_AT = datetime.min


class Repository(ABC):
    """Storage interface for the sentiment monitor."""

    @abstractmethod
    async def list_comments(self, filters: CommentFilter | None = None) -> list[Comment]:
        """Return comments matching ``filters`` in the requested order."""

    @abstractmethod
    async def create_comment(self, comment: Comment) -> Comment:
        """Store a new comment, assigning id and created_at."""

    @abstractmethod
    async def count_comments(self) -> int:
        """Total number of stored comments."""

    @abstractmethod
    async def list_authors(self) -> list[Author]:
        """Return all authors."""

    @abstractmethod
    async def create_author(self, author: Author) -> Author:
        """Store a new author, assigning an id."""

    @abstractmethod
    async def get_snapshots(
        self,
        user_id: str,
        range_: str | None = None,
        group: str | None = None,
    ) -> list[Snapshot]:
        """Daily snapshots for a user's comments, oldest first."""

    @abstractmethod
    async def get_config(self, user_id: str) -> UserConfig | None:
        """Return the user's config, or None when never saved."""

    @abstractmethod
    async def update_config(
        self,
        user_id: str,
        *,
        huggingface_token: str | None = None,
        demo_mode: str | None = None,
        sentiment_threshold: float | None = None,
    ) -> UserConfig:
        """Merge the provided fields over the stored config (or defaults)."""


class InMemoryRepository(Repository):
    """
    Dict-backed repository.

    All mutations run under one asyncio.Lock. When a SnapshotWriter is
    given, each mutation schedules a background JSON dump; the in-memory
    state is authoritative regardless of the write outcome.

    Usage:
        repo = InMemoryRepository()
        created = await repo.create_comment(comment)
        recent = await repo.list_comments(CommentFilter(user_id="u1"))
    """

    def __init__(
        self,
        authors: list[Author] | None = None,
        comments: list[Comment] | None = None,
        writer: SnapshotWriter | None = None,
        aggregator: SnapshotAggregator | None = None,
    ) -> None:
        self._authors: dict[str, Author] = {a.id: a for a in authors or []}
        self._comments: dict[str, Comment] = {c.id: c for c in comments or []}
        self._configs: dict[str, UserConfig] = {}
        self._writer = writer
        self._aggregator = aggregator or SnapshotAggregator()
        self._lock = asyncio.Lock()

    # ── Comments ─────────────────────────────────────────

    async def list_comments(self, filters: CommentFilter | None = None) -> list[Comment]:
        """
        Apply each active filter in turn, then sort.

        Args:
            filters: Optional filter set; None returns every comment

        Returns:
            New list; the store is not modified.
        """
        f = filters or CommentFilter()
        comments = list(self._comments.values())

        if f.user_id:
            comments = [c for c in comments if c.user_id == f.user_id]
        if f.sources:
            comments = [c for c in comments if c.source in f.sources]
        if f.sentiments:
            comments = [c for c in comments if c.sentiment_label in f.sentiments]
        if f.min_influence is not None:
            comments = [c for c in comments if c.effective_influence >= f.min_influence]
        if f.countries_exclude:
            comments = [c for c in comments if (c.country or "") not in f.countries_exclude]
        if f.languages_exclude:
            comments = [c for c in comments if (c.lang or "") not in f.languages_exclude]
        if f.q:
            query = f.q.lower()
            comments = [c for c in comments if self._matches_query(c, query)]
        if f.date_from is not None:
            date_from = ensure_utc(f.date_from)
            comments = [
                c for c in comments
                if c.created_at is not None and ensure_utc(c.created_at) >= date_from
            ]
        if f.date_to is not None:
            date_to = ensure_utc(f.date_to)
            comments = [
                c for c in comments
                if c.created_at is not None and ensure_utc(c.created_at) <= date_to
            ]

        if f.order == "top":
            comments.sort(key=lambda c: c.effective_influence, reverse=True)
        else:
            comments.sort(key=_created_sort_key, reverse=True)

        return comments

    def _matches_query(self, comment: Comment, query: str) -> bool:
        if query in comment.text.lower():
            return True
        if comment.author_id:
            author = self._authors.get(comment.author_id)
            return author is not None and query in author.name.lower()
        return False

    async def create_comment(self, comment: Comment) -> Comment:
        stored = replace(comment, id=new_id(), created_at=utcnow())
        async with self._lock:
            self._comments[stored.id] = stored
            self._persist()
        logger.debug("Comment stored", comment_id=stored.id, user_id=stored.user_id)
        return stored

    async def count_comments(self) -> int:
        return len(self._comments)

    # ── Authors ──────────────────────────────────────────

    async def list_authors(self) -> list[Author]:
        return list(self._authors.values())

    async def create_author(self, author: Author) -> Author:
        stored = replace(author, id=new_id())
        async with self._lock:
            self._authors[stored.id] = stored
            self._persist()
        return stored

    # ── Snapshots ────────────────────────────────────────

    async def get_snapshots(
        self,
        user_id: str,
        range_: str | None = None,
        group: str | None = None,
    ) -> list[Snapshot]:
        comments = await self.list_comments(CommentFilter(user_id=user_id))
        return self._aggregator.build(comments, user_id, range_=range_, group=group)

    # ── Config ───────────────────────────────────────────

    async def get_config(self, user_id: str) -> UserConfig | None:
        return self._configs.get(user_id)

    async def update_config(
        self,
        user_id: str,
        *,
        huggingface_token: str | None = None,
        demo_mode: str | None = None,
        sentiment_threshold: float | None = None,
    ) -> UserConfig:
        async with self._lock:
            current = self._configs.get(user_id) or UserConfig(user_id=user_id)
            changes = {
                key: value
                for key, value in (
                    ("huggingface_token", huggingface_token),
                    ("demo_mode", demo_mode),
                    ("sentiment_threshold", sentiment_threshold),
                )
                if value is not None
            }
            updated = replace(current, **changes)
            self._configs[user_id] = updated
            self._persist()

        logger.info("Config updated", user_id=user_id, fields=sorted(changes))
        return updated

    # ── Persistence ──────────────────────────────────────

    def _persist(self) -> None:
        """Schedule a JSON snapshot. Caller holds the lock."""
        if self._writer is None:
            return
        self._writer.schedule({
            "comments": [c.to_dict() for c in self._comments.values()],
            "authors": [a.to_dict() for a in self._authors.values()],
            "configs": [c.to_dict() for c in self._configs.values()],
        })

    async def close(self) -> None:
        """Wait for outstanding snapshot writes."""
        if self._writer is not None:
            await self._writer.drain()


def _created_sort_key(comment: Comment) -> datetime:
    if comment.created_at is None:
        return _MISSING_CREATED_AT
    return ensure_utc(comment.created_at).replace(tzinfo=None)
