"""Author endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from sentiment_monitor.api.auth import verify_api_key
from sentiment_monitor.api.dependencies import get_repository
from sentiment_monitor.api.models import AuthorCreateRequest, AuthorItem, ErrorResponse
from sentiment_monitor.storage.repository import Repository
from sentiment_monitor.storage.schemas import Author

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "/api/authors",
    response_model=list[AuthorItem],
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
    },
    summary="List authors",
)
async def list_authors(
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> list[AuthorItem]:
    authors = await repository.list_authors()
    return [AuthorItem.model_validate(a.to_dict()) for a in authors]


@router.post(
    "/api/authors",
    response_model=AuthorItem,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Invalid author data"},
    },
    summary="Register an author",
)
async def create_author(
    request: AuthorCreateRequest,
    user_id: str = Depends(verify_api_key),
    repository: Repository = Depends(get_repository),
) -> AuthorItem:
    try:
        author = Author(
            name=request.name,
            handle=request.handle,
            followers=request.followers,
            avatar_url=request.avatar_url,
            platform=request.platform,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    created = await repository.create_author(author)
    logger.info("Author created", author_id=created.id, platform=created.platform)
    return AuthorItem.model_validate(created.to_dict())
