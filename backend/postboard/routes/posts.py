"""
Postboard Backend — Post Route Handlers
=========================================

What:  POST /api/v1/posts/create.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.database import get_db_session
from postboard.schemas.common import ErrorResponse
from postboard.schemas.post import CreatePostRequest, CreatePostResponse
from postboard.services.post_service import post_service

router = APIRouter(prefix="/api/v1/posts", tags=["Posts"])


@router.post(
    "/create",
    status_code=201,
    response_model=CreatePostResponse,
    responses={
        400: {"description": "Missing fields or age out of range", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a post",
    description="Stores a post with a name, a description and an age between 1 and 150.",
)
async def create_post(
    payload: CreatePostRequest,
    db: AsyncSession = Depends(get_db_session),
) -> CreatePostResponse:
    return await post_service.create_post(db, payload)
