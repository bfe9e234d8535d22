"""
Health check and Prometheus metrics endpoints.
"""

import structlog
from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from sentiment_monitor import __version__
from sentiment_monitor.api.dependencies import get_repository
from sentiment_monitor.api.models import HealthResponse
from sentiment_monitor.config.settings import get_settings
from sentiment_monitor.observability.metrics import get_metrics
from sentiment_monitor.sentiment.classifier import SentimentClassifier
from sentiment_monitor.storage.repository import Repository

router = APIRouter()
metrics_router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health",
)
async def health(
    repository: Repository = Depends(get_repository),
) -> HealthResponse:
    settings = get_settings()

    try:
        comment_count = await repository.count_comments()
        status = "healthy"
    except Exception as e:
        logger.warning("Health check storage probe failed", error=str(e))
        comment_count = 0
        status = "unhealthy"

    return HealthResponse(
        status=status,
        storage_backend=settings.storage_backend,
        comment_count=comment_count,
        classifier_mode=SentimentClassifier.select_mode(
            settings.huggingface_api_token, settings.demo_mode
        ),
        version=__version__,
    )


@metrics_router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(
        content=generate_latest(get_metrics().registry),
        media_type=CONTENT_TYPE_LATEST,
    )
