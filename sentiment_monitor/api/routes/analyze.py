"""
Ad-hoc sentiment analysis endpoint.
"""

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_comment_service
from sentiment_monitor.api.models import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from sentiment_monitor.services.comment_service import CommentService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Text is required"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Classify a text",
    description="""
    Classify a single text as POSITIVE, NEUTRAL or NEGATIVE.

    Uses the remote Hugging Face model when a token is configured and demo
    mode is off; otherwise a keyword heuristic. Remote failures fall back
    to a local check and are never reported as errors.
    """,
)
async def analyze(
    body: AnalyzeRequest,
    user_id: str = Depends(verify_api_key),
    service: CommentService = Depends(get_comment_service),
) -> AnalyzeResponse:
    if not body.text.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Text is required",
        )

    start_time = time.perf_counter()
    try:
        result = await service.analyze(user_id, body.text)
    except Exception as e:
        logger.error("analyze_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Analysis failed",
        )

    logger.info(
        "Text analyzed",
        sentiment_label=result.label,
        latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return AnalyzeResponse(sentiment_label=result.label, sentiment_score=result.score)
