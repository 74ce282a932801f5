"""
Postboard Backend — Post SQLAlchemy Model
===========================================

What:  ORM model representing the `posts` table.
Why:   Persisted by the post store; created only through POST /api/v1/posts/create.

The age bounds are enforced twice: by the handler before the insert (so the
client gets a 400 with a readable message) and by a CHECK constraint (so rows
written by anything else still obey the range).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.database import Base


AGE_MIN = 1
AGE_MAX = 150


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """A simple content record: name, description and age."""

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # TEXT: descriptions have no natural length limit
    description: Mapped[str] = mapped_column(Text, nullable=False)

    age: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint(f"age BETWEEN {AGE_MIN} AND {AGE_MAX}", name="ck_posts_age_range"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, name='{self.name}', age={self.age})>"
