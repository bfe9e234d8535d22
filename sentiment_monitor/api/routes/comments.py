"""Comment endpoints for querying and submitting feedback."""

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_comment_service, get_repository
from sentiment_monitor.api.models import CommentCreateRequest, CommentItem, ErrorResponse
from sentiment_monitor.services.comment_service import CommentService
from sentiment_monitor.storage.repository import Repository
from sentiment_monitor.storage.schemas import (
    VALID_SOURCES,
    Comment,
    CommentFilter,
    parse_timestamp,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


def _to_item(comment: Comment) -> CommentItem:
    return CommentItem.model_validate(comment.to_dict())


def _parse_bound(name: str, value: str | None):
    try:
        return parse_timestamp(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid {name} {value!r}. Expected an ISO-8601 date or datetime.",
        )


def _as_set(values: list[str] | None) -> frozenset[str] | None:
    if not values:
        return None
    return frozenset(values)


@router.get(
    "/api/comments",
    response_model=list[CommentItem],
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Invalid filter parameter"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="List comments",
    description=(
        "List the caller's comments. All filters are optional and combined "
        "with AND. List filters repeat the key (source=google&source=x). "
        "order=top sorts by influence, anything else by most recent."
    ),
)
async def list_comments(
    source: list[str] | None = Query(default=None, description="Keep these sources"),
    sentiment: list[str] | None = Query(default=None, description="Keep these labels"),
    min_influence: int | None = Query(default=None, alias="minInfluence", ge=0),
    countries_exclude: list[str] | None = Query(default=None, alias="countriesExclude"),
    languages_exclude: list[str] | None = Query(default=None, alias="languagesExclude"),
    q: str | None = Query(default=None, description="Text or author name substring"),
    date_from: str | None = Query(default=None, alias="dateFrom"),
    date_to: str | None = Query(default=None, alias="dateTo"),
    order: str | None = Query(default=None, description="recent (default) or top"),
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> list[CommentItem]:
    start_time = time.perf_counter()

    filters = CommentFilter(
        user_id=user_id,
        sources=_as_set(source),
        sentiments=_as_set(sentiment),
        min_influence=min_influence,
        countries_exclude=_as_set(countries_exclude),
        languages_exclude=_as_set(languages_exclude),
        q=q or None,
        date_from=_parse_bound("dateFrom", date_from),
        date_to=_parse_bound("dateTo", date_to),
        order=order or "recent",
    )

    try:
        comments = await repository.list_comments(filters)
    except Exception as e:
        logger.error("list_comments_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )

    logger.info(
        "Comments listed",
        count=len(comments),
        order=filters.order,
        latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return [_to_item(c) for c in comments]


@router.post(
    "/api/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Invalid comment data"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Submit a comment",
    description=(
        "Store a new comment for the caller. The text is classified at "
        "creation and the sentiment is never recomputed."
    ),
)
async def create_comment(
    request: CommentCreateRequest,
    user_id: str = Depends(verify_api_key),
    service: CommentService = Depends(get_comment_service),
) -> CommentItem:
    if request.source not in VALID_SOURCES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Invalid source {request.source!r}. "
                f"Must be one of: {sorted(VALID_SOURCES)}"
            ),
        )
    if not request.text.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Comment text must not be empty",
        )

    try:
        created = await service.create_comment(
            user_id,
            source=request.source,
            text=request.text,
            author_id=request.author_id,
            lang=request.lang,
            country=request.country,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except Exception as e:
        logger.error("create_comment_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )

    return _to_item(created)
