"""Models capturing per-browser likes on posts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from digix_blog.db.session import Base
from digix_blog.db.time import utcnow

if TYPE_CHECKING:
    from .blog import Blog


class BlogLike(Base):
    """A like from one browser fingerprint.

    Row existence means "liked"; the fingerprint is a dedupe key, not an identity.
    """

    __tablename__ = "blog_likes"
    __table_args__ = (
        # One like per post and fingerprint.
        UniqueConstraint("blog_id", "user_fingerprint", name="uq_blog_likes_blog_fingerprint"),
        Index("ix_blog_likes_blog_id", "blog_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_fingerprint: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    blog: Mapped[Blog] = relationship("Blog", back_populates="likes")
