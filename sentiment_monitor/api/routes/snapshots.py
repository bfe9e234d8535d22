"""Snapshot endpoint for dashboard charts."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_repository
from sentiment_monitor.api.models import ErrorResponse, SnapshotItem
from sentiment_monitor.storage.repository import Repository

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "/api/snapshots",
    response_model=list[SnapshotItem],
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Daily snapshots",
    description=(
        "One snapshot per UTC day ending today, oldest first. range=1d or 7d, "
        "anything else is 30 days. group is accepted but buckets are always daily."
    ),
)
async def get_snapshots(
    range_: str | None = Query(default=None, alias="range"),
    group: str | None = Query(default=None),
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> list[SnapshotItem]:
    try:
        snapshots = await repository.get_snapshots(user_id, range_=range_, group=group)
    except Exception as e:
        logger.error("get_snapshots_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch snapshots",
        )

    return [SnapshotItem.model_validate(s.to_dict()) for s in snapshots]
