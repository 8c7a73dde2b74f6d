"""Read access to published posts for page rendering and suggestions.

Public callers only ever see published content: draft or missing posts are
reported as ``None``. Store failures are logged for operators and degrade to
``None`` or an empty list rather than propagating.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from digix_blog.core.settings import settings
from digix_blog.models import Blog
from digix_blog.repositories.blog_repo import BlogRepository

logger = logging.getLogger(__name__)


def fetch_post_by_slug(db: Session, slug: str) -> Blog | None:
    """Return the published post whose slug matches exactly.

    Args:
        db: Database session
        slug: URL slug requested by the visitor

    Returns:
        The post, or None when it is missing, unpublished, or the store failed
    """
    try:
        return BlogRepository(db).get_published_by_slug(slug)
    except SQLAlchemyError:
        logger.exception("Error fetching blog by slug %r", slug)
        return None


def fetch_post_by_id(db: Session, blog_id: str) -> Blog | None:
    """Return a published post by identifier, or None."""
    try:
        return BlogRepository(db).get_published_by_id(blog_id)
    except SQLAlchemyError:
        logger.exception("Error fetching blog %s", blog_id)
        return None


def fetch_all_published(db: Session) -> list[Blog]:
    """Return all published posts ordered newest first."""
    try:
        return BlogRepository(db).list_published()
    except SQLAlchemyError:
        logger.exception("Error fetching published blogs")
        return []


class TopicalPost(Protocol):
    """Anything carrying the fields used to relate posts (ORM rows or API schemas)."""

    id: str
    category: str
    tags: list[str]


PostT = TypeVar("PostT", bound=TopicalPost)


def _shares_topic(candidate: TopicalPost, post: TopicalPost) -> bool:
    # An empty category means "uncategorised", not a shared category.
    if post.category and candidate.category == post.category:
        return True
    tags = set(post.tags or ())
    return any(tag in tags for tag in candidate.tags or ())


def fetch_related(
    post: TopicalPost,
    all_published: Sequence[PostT],
    limit: int | None = None,
) -> list[PostT]:
    """Pick posts that share a category or a tag with ``post``.

    The source ordering is kept as is (newest first when fed from
    ``fetch_all_published``); no relevance ranking is applied. Works on ORM
    rows server-side and on API schemas in the client controller.

    Args:
        post: The post currently being viewed
        all_published: Candidate posts, already ordered
        limit: Maximum number of suggestions, defaults to ``RELATED_POSTS_LIMIT``

    Returns:
        At most ``limit`` related posts, never including ``post`` itself
    """
    if limit is None:
        limit = settings.related_posts_limit
    if limit <= 0:
        return []

    related: list[PostT] = []
    for candidate in all_published:
        if candidate.id == post.id or not _shares_topic(candidate, post):
            continue
        related.append(candidate)
        if len(related) >= limit:
            break
    return related
