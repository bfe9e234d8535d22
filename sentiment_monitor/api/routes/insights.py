"""Static insight endpoints: suggestions, topics, geo and report stubs."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.models import (
    ErrorResponse,
    GeoPointItem,
    ReportResponse,
    SuggestionItem,
    TopicBreakdownItem,
)
from sentiment_monitor.insights.catalog import (
    REPORT_KINDS,
    acknowledge_report,
    get_geo_points,
    get_suggestions,
    get_topic_breakdown,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "/api/suggestions",
    response_model=list[SuggestionItem],
    summary="Action suggestions",
)
async def list_suggestions(
    category: str | None = Query(
        default=None,
        description="Filter by category: POSITIVE, NEUTRAL, NEGATIVE",
    ),
    user_id: str = Depends(verify_api_key),
) -> list[SuggestionItem]:
    return [SuggestionItem(**s) for s in get_suggestions(category)]


@router.get(
    "/api/topic-breakdown",
    response_model=list[TopicBreakdownItem],
    summary="Topic breakdown",
)
async def topic_breakdown(
    user_id: str = Depends(verify_api_key),
) -> list[TopicBreakdownItem]:
    return [TopicBreakdownItem(**t) for t in get_topic_breakdown()]


@router.get(
    "/api/geo",
    response_model=list[GeoPointItem],
    summary="Mentions by country",
)
async def geo(
    user_id: str = Depends(verify_api_key),
) -> list[GeoPointItem]:
    return [GeoPointItem(**g) for g in get_geo_points()]


@router.post(
    "/api/report/{kind}",
    response_model=ReportResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown report type"},
    },
    summary="Request a report export",
    description="Acknowledge a pdf, excel or infographic export. No file is produced.",
)
async def generate_report(
    kind: str,
    user_id: str = Depends(verify_api_key),
) -> ReportResponse:
    if kind not in REPORT_KINDS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown report type {kind!r}. Must be one of: {sorted(REPORT_KINDS)}",
        )

    ack = acknowledge_report(kind)
    logger.info("Report requested", kind=kind, user_id=user_id)
    return ReportResponse(message=ack["message"], download_url=ack["downloadUrl"])
