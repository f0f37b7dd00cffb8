"""Moderation Rejection ORM — one row per field a submission failed on.

Invariants:
    - id is UUID primary key
    - error_key is always a ReasonCode value
    - excerpt holds at most the first 200 characters of the rejected input
    - created_at is timezone-aware UTC

Design Decisions:
    - One row per failing field (not per submission): admins filter by rule
    - Input excerpt only, never the full text: enough to spot false positives
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from bazaar.db.base import Base

EXCERPT_LENGTH = 200


class ModerationRejection(Base):
    """A field of a listing or comment the moderation rules refused."""
    __tablename__ = "moderation_rejections"
    __table_args__ = (
        Index("ix_moderation_rejections_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    subject: Mapped[str] = mapped_column(String(20), nullable=False)
    field: Mapped[str] = mapped_column(String(20), nullable=False)
    error_key: Mapped[str] = mapped_column(String(64), nullable=False)
    params: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    excerpt: Mapped[str] = mapped_column(
        String(EXCERPT_LENGTH), nullable=False, default="",
    )
    locale: Mapped[str] = mapped_column(String(5), nullable=False, default="ru")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
