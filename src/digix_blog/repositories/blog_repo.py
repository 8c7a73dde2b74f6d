"""Data access helpers for blog posts, likes and comments."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from digix_blog.models import Blog, BlogComment, BlogLike
from digix_blog.models.blog import BLOG_STATUS_PUBLISHED
from digix_blog.models.comment import COMMENT_STATUS_APPROVED, COMMENT_STATUS_PENDING

__all__ = ["BlogRepository", "InteractionRepository"]


class BlogRepository:
    """Thin wrapper around database access for blog entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, blog_id: str) -> Blog | None:
        """Return a post by identifier regardless of status."""
        return self.session.get(Blog, blog_id)

    def get_published_by_slug(self, slug: str) -> Blog | None:
        """Return the published post with exactly this slug."""
        result = self.session.execute(
            select(Blog).where(Blog.slug == slug, Blog.status == BLOG_STATUS_PUBLISHED)
        )
        return result.scalars().first()

    def get_published_by_id(self, blog_id: str) -> Blog | None:
        """Return a post by identifier if it is published."""
        result = self.session.execute(
            select(Blog).where(Blog.id == blog_id, Blog.status == BLOG_STATUS_PUBLISHED)
        )
        return result.scalars().first()

    def slug_exists(self, slug: str, *, exclude_id: str | None = None) -> bool:
        """Return whether another post already uses ``slug``."""
        stmt = select(Blog.id).where(Blog.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Blog.id != exclude_id)
        return self.session.execute(stmt).first() is not None

    def list_published(self) -> list[Blog]:
        """Return published posts, newest first."""
        result = self.session.execute(
            select(Blog)
            .where(Blog.status == BLOG_STATUS_PUBLISHED)
            .order_by(Blog.created_at.desc())
        )
        return list(result.scalars())

    def list_all(self) -> list[Blog]:
        """Return every post regardless of status, newest first."""
        result = self.session.execute(select(Blog).order_by(Blog.created_at.desc()))
        return list(result.scalars())

    def create(self, values: Mapping[str, Any]) -> Blog:
        """Insert a new post and return the persisted ORM instance."""
        blog = Blog(**values)
        self.session.add(blog)
        self.session.flush()
        return blog

    def update(self, blog: Blog, values: Mapping[str, Any]) -> Blog:
        """Apply column values to an existing post."""
        for key, value in values.items():
            setattr(blog, key, value)
        self.session.flush()
        return blog

    def delete(self, blog: Blog) -> None:
        """Hard-delete a post together with its likes and comments."""
        self.session.delete(blog)
        self.session.flush()


class InteractionRepository:
    """Data access for the like and comment tables."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def has_like(self, blog_id: str, fingerprint: str) -> bool:
        """Return whether a like row exists for the pair."""
        stmt = select(BlogLike.id).where(
            BlogLike.blog_id == blog_id,
            BlogLike.user_fingerprint == fingerprint,
        )
        return self.session.execute(stmt).first() is not None

    def delete_like(self, blog_id: str, fingerprint: str) -> int:
        """Delete the like for the pair and return the number of rows removed."""
        result = self.session.execute(
            delete(BlogLike).where(
                BlogLike.blog_id == blog_id,
                BlogLike.user_fingerprint == fingerprint,
            )
        )
        return result.rowcount or 0

    def insert_like(self, blog_id: str, fingerprint: str) -> BlogLike:
        """Insert a like row; raises ``IntegrityError`` if the pair exists."""
        like = BlogLike(blog_id=blog_id, user_fingerprint=fingerprint)
        self.session.add(like)
        self.session.flush()
        return like

    def count_likes(self, blog_id: str) -> int:
        """Return the number of like rows for a post."""
        stmt = select(func.count()).select_from(BlogLike).where(BlogLike.blog_id == blog_id)
        return self.session.execute(stmt).scalar_one()

    def store_likes_count(self, blog_id: str, count: int) -> None:
        """Write the denormalized like count back to the post row."""
        blog = self.session.get(Blog, blog_id)
        if blog is not None:
            blog.likes_count = count
            self.session.flush()

    def list_approved_comments(self, blog_id: str) -> list[BlogComment]:
        """Return approved comments for a post, newest first."""
        result = self.session.execute(
            select(BlogComment)
            .where(
                BlogComment.blog_id == blog_id,
                BlogComment.status == COMMENT_STATUS_APPROVED,
            )
            .order_by(BlogComment.created_at.desc())
        )
        return list(result.scalars())

    def get_comment(self, comment_id: str) -> BlogComment | None:
        """Return a comment by identifier."""
        return self.session.get(BlogComment, comment_id)

    def insert_comment(
        self,
        *,
        blog_id: str,
        user_name: str,
        content: str,
        user_email: str | None,
    ) -> BlogComment:
        """Insert a comment in the pending state."""
        comment = BlogComment(
            blog_id=blog_id,
            user_name=user_name,
            user_email=user_email,
            content=content,
            status=COMMENT_STATUS_PENDING,
        )
        self.session.add(comment)
        self.session.flush()
        return comment
