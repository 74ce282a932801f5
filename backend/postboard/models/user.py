"""
Postboard Backend — User SQLAlchemy Model
===========================================

What:  ORM model representing the `users` table.
Why:   The credential store persists users through this mapping; Alembic
       reads it for migrations.

Table Design Rationale:
    - UUID primary key, generated in Python so SQLite and PostgreSQL behave alike
    - username / email: UNIQUE constraints are the source of truth for
      uniqueness. The handler's lookup is only a fast path; two concurrent
      registrations are settled by the database rejecting the second insert.
    - password_hash: passlib hash string (scheme$rounds$salt$checksum),
      never the plaintext password
    - logged_in: defaults to false; no handler changes it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, UniqueConstraint, Uuid, false, text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


USERNAME_MAX_LENGTH = 30


class User(Base):
    """
    A registered account.

    Lookups:
        - by email (login, logout, registration pre-check) → uq_users_email
        - by username (registration pre-check) → uq_users_username
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Stored lowercased and trimmed
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH),
        nullable=False,
    )

    # Stored lowercased and trimmed; the only login key
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    logged_in: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

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
        UniqueConstraint("email", name="uq_users_email"),
        UniqueConstraint("username", name="uq_users_username"),
    )

    def __repr__(self) -> str:
        # password_hash deliberately left out
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
