"""
Postboard Backend — Post Store
================================

What:  Writes `posts` rows.
Who:   PostService.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.models.post import Post

logger = logging.getLogger(__name__)


class PostStore:

    async def create(
        self,
        db: AsyncSession,
        name: str,
        description: str,
        age: int,
    ) -> Post:
        """Inserts a post and flushes so the generated id is available."""
        post = Post(name=name, description=description, age=age)
        db.add(post)
        await db.flush()
        logger.debug("Post row inserted: %s", post.id)
        return post

    async def count(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count(Post.id)))
        return result.scalar() or 0


post_store = PostStore()
