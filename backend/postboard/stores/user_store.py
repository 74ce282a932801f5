"""
Postboard Backend — Credential Store
======================================

What:  Reads and writes `users` rows.
Who:   UserService (registration, login, logout).

Callers pass emails and usernames already normalized (trimmed, lowercased);
the store compares them verbatim so the unique indexes can serve the lookups.
"""

import logging
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Stateless: every method receives the session of the current request."""

    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """Returns the user with this normalized email, or None."""
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_email_or_username(
        self, db: AsyncSession, email: str, username: str
    ) -> Optional[User]:
        """
        Returns any user holding this email or this username.

        Used as the registration pre-check. Both columns are unique, so at
        most two rows can match; the first one is enough to reject.
        """
        result = await db.execute(
            select(User)
            .where(or_(User.email == email, User.username == username))
            .limit(1)
        )
        return result.scalars().first()

    async def create(
        self,
        db: AsyncSession,
        username: str,
        email: str,
        password_hash: str,
    ) -> User:
        """
        Inserts a new user and flushes so the id and timestamps are populated.

        Raises:
            sqlalchemy.exc.IntegrityError: email or username taken by a
                concurrent insert that committed first.
        """
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            logged_in=False,
        )
        db.add(user)
        await db.flush()
        logger.debug("User row inserted: %s", user.id)
        return user

    async def count(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count(User.id)))
        return result.scalar() or 0


user_store = UserStore()
