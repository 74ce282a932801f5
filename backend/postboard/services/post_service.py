"""
Postboard Backend — Post Service (Post Creation Handler)
==========================================================

What:  Validates a post body and stores it.
Who:   Called by POST /api/v1/posts/create.

Validation happens entirely before the store call, so a rejected request
never adds a row.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from postboard.exceptions import InternalError
from postboard.models.post import AGE_MAX, AGE_MIN
from postboard.schemas.post import CreatePostRequest, CreatePostResponse
from postboard.services.validation import check_range, require_fields
from postboard.stores.post_store import post_store

logger = logging.getLogger(__name__)


class PostService:

    async def create_post(
        self, db: AsyncSession, payload: CreatePostRequest
    ) -> CreatePostResponse:
        """
        Create a post from {name, description, age}.

        Raises:
            ValidationError: Missing/blank field, or age outside [1, 150]
            InternalError: Store failure
        """
        require_fields({
            "name": payload.name,
            "description": payload.description,
            "age": payload.age,
        })
        check_range("age", payload.age, AGE_MIN, AGE_MAX)

        try:
            post = await post_store.create(
                db,
                name=payload.name.strip(),
                description=payload.description.strip(),
                age=payload.age,
            )
        except Exception as e:
            logger.error("Store error creating post: %s", str(e), exc_info=True)
            raise InternalError(context={"original_error": type(e).__name__})

        logger.info("Post created: %s", post.id)
        return CreatePostResponse(id=post.id)


post_service = PostService()
