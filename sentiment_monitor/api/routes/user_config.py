"""Per-user settings endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_repository
from sentiment_monitor.api.models import ConfigItem, ConfigUpdateRequest, ErrorResponse
from sentiment_monitor.storage.repository import Repository

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "/api/config",
    response_model=ConfigItem,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
    },
    summary="Get settings",
    description="Return the caller's settings, or defaults when none were saved.",
)
async def get_config(
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> ConfigItem:
    config = await repository.get_config(user_id)
    if config is None:
        return ConfigItem()
    return ConfigItem.model_validate(config.to_dict())


@router.put(
    "/api/config",
    response_model=ConfigItem,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Update settings",
    description="Merge the provided fields over the stored settings (upsert).",
)
async def update_config(
    request: ConfigUpdateRequest,
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> ConfigItem:
    try:
        config = await repository.update_config(
            user_id,
            huggingface_token=request.huggingface_token,
            demo_mode=request.demo_mode,
            sentiment_threshold=request.sentiment_threshold,
        )
    except Exception as e:
        logger.error("update_config_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update config",
        )

    return ConfigItem.model_validate(config.to_dict())
