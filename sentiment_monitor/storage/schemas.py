"""
Schema definitions for stored records.

Python attributes are snake_case; ``to_dict()`` produces the camelCase
shape used by the dashboard client and by the JSON storage snapshot.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from sentiment_monitor.sentiment.schemas import VALID_SENTIMENT_LABELS

VALID_SOURCES: frozenset[str] = frozenset({
    "google",
    "facebook",
    "instagram",
    "x",
    "tiktok",
    "news",
    "blog",
    "video",
    "podcast",
    "manual",
    "other",
})

VALID_ORDERS: frozenset[str] = frozenset({"recent", "top"})

MAX_INFLUENCE = 10

DEFAULT_DEMO_MODE = "true"
DEFAULT_SENTIMENT_THRESHOLD = 0.4


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class Comment:
    """
    A single piece of customer feedback.

    Frozen: sentiment fields are derived once at creation and never
    recomputed.

    Attributes:
        text: Feedback text (non-empty).
        source: Channel the feedback came from (see VALID_SOURCES).
        sentiment_label: POSITIVE, NEUTRAL or NEGATIVE.
        sentiment_score: Score in [0, 1].
        id: Unique identifier (UUID4 string).
        user_id: Owning user.
        author_id: Optional Author reference.
        lang: Language code.
        country: Country code.
        created_at: Creation time (UTC). May be None for imported records.
        influence: Reach weight in [0, 10]; None counts as 0.
    """

    text: str
    source: str
    sentiment_label: str
    sentiment_score: float
    id: str = field(default_factory=new_id)
    user_id: str | None = None
    author_id: str | None = None
    lang: str | None = "en"
    country: str | None = "US"
    created_at: datetime | None = field(default_factory=utcnow)
    influence: int | None = 0

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("Comment text must not be empty")
        if self.source not in VALID_SOURCES:
            raise ValueError(
                f"Invalid source {self.source!r}. "
                f"Must be one of: {sorted(VALID_SOURCES)}"
            )
        if self.sentiment_label not in VALID_SENTIMENT_LABELS:
            raise ValueError(
                f"Invalid sentiment_label {self.sentiment_label!r}. "
                f"Must be one of: {sorted(VALID_SENTIMENT_LABELS)}"
            )
        if not (0.0 <= self.sentiment_score <= 1.0):
            raise ValueError(
                f"Invalid sentiment_score {self.sentiment_score}. Must be between 0 and 1."
            )
        if self.influence is not None and not (0 <= self.influence <= MAX_INFLUENCE):
            raise ValueError(
                f"Invalid influence {self.influence}. Must be between 0 and {MAX_INFLUENCE}."
            )

    @property
    def effective_influence(self) -> int:
        return self.influence or 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "source": self.source,
            "authorId": self.author_id,
            "text": self.text,
            "lang": self.lang,
            "country": self.country,
            "createdAt": _isoformat(self.created_at),
            "sentimentLabel": self.sentiment_label,
            "sentimentScore": self.sentiment_score,
            "influence": self.influence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Comment":
        """Build a Comment from its camelCase dict form."""
        return cls(
            id=data.get("id") or new_id(),
            user_id=data.get("userId"),
            source=data["source"],
            author_id=data.get("authorId"),
            text=data["text"],
            lang=data.get("lang") or "en",
            country=data.get("country") or "US",
            created_at=parse_timestamp(data.get("createdAt")),
            sentiment_label=data["sentimentLabel"],
            sentiment_score=float(data["sentimentScore"]),
            influence=data.get("influence"),
        )


@dataclass(frozen=True)
class Author:
    """A voice or profile that comments may be attributed to."""

    name: str
    id: str = field(default_factory=new_id)
    handle: str | None = None
    followers: int | None = None
    avatar_url: str | None = None
    platform: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Author name must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "handle": self.handle,
            "followers": self.followers,
            "avatarUrl": self.avatar_url,
            "platform": self.platform,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Author":
        return cls(
            id=data.get("id") or new_id(),
            name=data["name"],
            handle=data.get("handle"),
            followers=data.get("followers"),
            avatar_url=data.get("avatarUrl"),
            platform=data.get("platform"),
        )


@dataclass(frozen=True)
class UserConfig:
    """
    Per-user settings.

    Attributes:
        user_id: Owning user (one record per user).
        id: Record identifier, kept stable across updates.
        huggingface_token: Optional token enabling remote classification.
        demo_mode: "true" or "false"; "true" forces the heuristic classifier.
        sentiment_threshold: Dashboard threshold, passed through unvalidated.
    """

    user_id: str
    id: str = field(default_factory=new_id)
    huggingface_token: str | None = None
    demo_mode: str = DEFAULT_DEMO_MODE
    sentiment_threshold: float = DEFAULT_SENTIMENT_THRESHOLD

    @property
    def demo_mode_enabled(self) -> bool:
        return str(self.demo_mode).lower() == "true"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "huggingfaceToken": self.huggingface_token,
            "demoMode": self.demo_mode,
            "sentimentThreshold": self.sentiment_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserConfig":
        return cls(
            id=data.get("id") or new_id(),
            user_id=data["userId"],
            huggingface_token=data.get("huggingfaceToken"),
            demo_mode=data.get("demoMode") or DEFAULT_DEMO_MODE,
            sentiment_threshold=float(
                data.get("sentimentThreshold", DEFAULT_SENTIMENT_THRESHOLD)
            ),
        )


@dataclass(frozen=True)
class Snapshot:
    """
    Per-day aggregate over a user's comments. Derived, never stored.

    Invariant: mentions == pos + neu + neg.
    """

    user_id: str | None
    ts: datetime
    mentions: int = 0
    reach: int = 0
    avg_score: float = 0.0
    pos: int = 0
    neu: int = 0
    neg: int = 0
    id: str = field(default_factory=new_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "ts": self.ts.isoformat(),
            "mentions": self.mentions,
            "reach": self.reach,
            "avgScore": self.avg_score,
            "pos": self.pos,
            "neu": self.neu,
            "neg": self.neg,
        }


@dataclass(frozen=True)
class CommentFilter:
    """
    Optional, independently-applied comment filters combined with AND.

    ``None`` or an empty collection disables a filter.

    Attributes:
        user_id: Exact owner match.
        sources: Keep comments whose source is in this set.
        sentiments: Keep comments whose label is in this set.
        min_influence: Keep comments with influence >= this (missing = 0).
        countries_exclude: Drop comments whose country is in this set.
        languages_exclude: Drop comments whose language is in this set.
        q: Case-insensitive substring of text or linked author name.
        date_from: Inclusive lower bound on created_at.
        date_to: Inclusive upper bound on created_at.
        order: "top" (influence desc) or "recent" (created_at desc).
    """

    user_id: str | None = None
    sources: frozenset[str] | None = None
    sentiments: frozenset[str] | None = None
    min_influence: int | None = None
    countries_exclude: frozenset[str] | None = None
    languages_exclude: frozenset[str] | None = None
    q: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    order: str = "recent"
