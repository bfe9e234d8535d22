"""
Request and response models for the dashboard API.

Field names are snake_case in Python and camelCase on the wire, matching
what the dashboard client sends and reads.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Response model for errors."""

    detail: str = Field(
        ...,
        description="Error message",
    )
    error_type: str = Field(
        default="error",
        description="Error type",
    )


# Comment models


class CommentCreateRequest(CamelModel):
    """Request model for submitting a comment."""

    source: str = Field(
        ...,
        description="Channel: google, facebook, instagram, x, tiktok, news, blog, video, podcast, manual, other",
    )
    author_id: str | None = Field(
        default=None,
        description="Optional author reference",
    )
    text: str = Field(
        ...,
        min_length=1,
        description="Feedback text",
    )
    lang: str | None = Field(
        default="en",
        description="Language code",
    )
    country: str | None = Field(
        default="US",
        description="Country code",
    )


class CommentItem(CamelModel):
    """A stored comment."""

    id: str
    user_id: str | None = None
    source: str
    author_id: str | None = None
    text: str
    lang: str | None = None
    country: str | None = None
    created_at: dt.datetime | None = None
    sentiment_label: str
    sentiment_score: float
    influence: int | None = None


# Analysis models


class AnalyzeRequest(BaseModel):
    """Request model for ad-hoc sentiment analysis."""

    text: str = Field(
        ...,
        min_length=1,
        description="Text to classify",
    )


class AnalyzeResponse(CamelModel):
    """Classification result."""

    sentiment_label: str = Field(
        ...,
        description="POSITIVE, NEUTRAL or NEGATIVE",
    )
    sentiment_score: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Score in [0, 1]",
    )


# Snapshot models


class SnapshotItem(CamelModel):
    """Per-day aggregate."""

    id: str
    user_id: str | None = None
    ts: dt.datetime
    mentions: int
    reach: int
    avg_score: float
    pos: int
    neu: int
    neg: int


# Author models


class AuthorCreateRequest(CamelModel):
    """Request model for registering an author."""

    name: str = Field(..., min_length=1)
    handle: str | None = None
    followers: int | None = Field(default=None, ge=0)
    avatar_url: str | None = None
    platform: str | None = None


class AuthorItem(CamelModel):
    """A stored author."""

    id: str
    name: str
    handle: str | None = None
    followers: int | None = None
    avatar_url: str | None = None
    platform: str | None = None


# Config models


class ConfigItem(CamelModel):
    """Per-user settings. id and userId are absent when never saved."""

    id: str | None = None
    user_id: str | None = None
    huggingface_token: str | None = None
    demo_mode: str = "true"
    sentiment_threshold: float = 0.4


class ConfigUpdateRequest(CamelModel):
    """Partial settings update; omitted fields keep their stored value."""

    huggingface_token: str | None = None
    demo_mode: str | None = None
    sentiment_threshold: float | None = None


# Insight models


class SuggestionItem(BaseModel):
    id: str
    category: str
    title: str
    body: str


class TopicBreakdownItem(BaseModel):
    label: str
    count: int
    score: float | None = None


class GeoPointItem(BaseModel):
    country: str
    mentions: int
    reach: int
    interactions: int


class ReportResponse(CamelModel):
    """Acknowledgement of a report export request."""

    message: str
    download_url: str


# Health


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(
        ...,
        description="Overall service status",
    )
    storage_backend: str
    comment_count: int
    classifier_mode: str = Field(
        ...,
        description="heuristic or remote, from server-wide settings",
    )
    version: str
