"""SQLAlchemy model for blog posts."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, CheckConstraint, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from digix_blog.db.session import Base
from digix_blog.db.time import utcnow

if TYPE_CHECKING:
    from .comment import BlogComment
    from .like import BlogLike

BLOG_STATUS_DRAFT = "draft"
BLOG_STATUS_PUBLISHED = "published"

BLOG_CATEGORIES = (
    "Marketing",
    "Best Practices",
    "Technology",
    "Agriculture",
    "Case Studies",
    "News",
    "Other",
)


def _new_id() -> str:
    return str(uuid.uuid4())


class Blog(Base):
    """Editorially authored post rendered on the marketing site.

    ``content`` holds trusted HTML written by editors and is served without
    sanitization, so it must never carry visitor input.
    """

    __tablename__ = "blogs"
    __table_args__ = (
        CheckConstraint("status IN ('draft', 'published')", name="ck_blogs_status"),
        Index("ix_blogs_status_created_at", "status", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str] = mapped_column(Text, nullable=False, default="")
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    thumbnail: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    meta_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=BLOG_STATUS_DRAFT)

    # Derived from content by the editorial layer.
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reading_time: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Denormalized count of blog_likes rows; recomputed on every toggle.
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    comments: Mapped[list[BlogComment]] = relationship(
        "BlogComment",
        back_populates="blog",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    likes: Mapped[list[BlogLike]] = relationship(
        "BlogLike",
        back_populates="blog",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_published(self) -> bool:
        """Return whether the post is visible to the public."""
        return self.status == BLOG_STATUS_PUBLISHED
