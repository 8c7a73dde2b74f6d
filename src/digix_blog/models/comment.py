"""Models for visitor comments awaiting or past moderation."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from digix_blog.db.session import Base
from digix_blog.db.time import utcnow

from .blog import _new_id

if TYPE_CHECKING:
    from .blog import Blog

COMMENT_STATUS_PENDING = "pending"
COMMENT_STATUS_APPROVED = "approved"
COMMENT_STATUS_REJECTED = "rejected"
COMMENT_STATUSES = (COMMENT_STATUS_PENDING, COMMENT_STATUS_APPROVED, COMMENT_STATUS_REJECTED)


class BlogComment(Base):
    """Comment left by a visitor; only approved rows are ever shown publicly."""

    __tablename__ = "blog_comments"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_blog_comments_status",
        ),
        Index("ix_blog_comments_blog_status", "blog_id", "status", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    blog_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_name: Mapped[str] = mapped_column(Text, nullable=False)
    user_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=COMMENT_STATUS_PENDING
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_by: Mapped[str | None] = mapped_column(Text, nullable=True)

    blog: Mapped[Blog] = relationship("Blog", back_populates="comments")
