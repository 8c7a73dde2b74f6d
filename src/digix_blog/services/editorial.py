"""Editorial helpers for authoring posts.

Covers slug generation, reading statistics and the create/update/delete
operations used by the admin API. Store failures are logged and reported as
``None``/``False``/``[]``; slug collisions are raised so the caller can tell
the editor what went wrong.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from digix_blog.core.settings import settings
from digix_blog.db.time import utcnow
from digix_blog.models import Blog
from digix_blog.repositories.blog_repo import BlogRepository
from digix_blog.schemas.blog import BlogCreate, BlogUpdate
from digix_blog.services.errors import SlugConflictError

logger = logging.getLogger(__name__)

_SLUG_INVALID = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_TAGS = re.compile(r"<[^>]*>")


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from a post title.

    >>> generate_slug("Best Practices: Farmer Outreach in 2025!")
    'best-practices-farmer-outreach-in-2025'
    """
    slug = _SLUG_INVALID.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    return _DASHES.sub("-", slug).strip("-")


def calculate_reading_stats(content: str) -> tuple[int, int]:
    """Return ``(word_count, reading_time)`` for an HTML body.

    Tags are stripped before counting; reading time is in whole minutes and
    never below one.
    """
    text = _TAGS.sub("", content or "")
    word_count = len(text.split())
    reading_time = max(1, math.ceil(word_count / settings.words_per_minute))
    return word_count, reading_time


def get_blog_by_id(db: Session, blog_id: str) -> Blog | None:
    """Return a post by identifier regardless of its status."""
    try:
        return BlogRepository(db).get_by_id(blog_id)
    except SQLAlchemyError:
        logger.exception("Error fetching blog %s", blog_id)
        return None


def get_all_blogs(db: Session) -> list[Blog]:
    """Return every post, drafts included, newest first."""
    try:
        return BlogRepository(db).list_all()
    except SQLAlchemyError:
        logger.exception("Error fetching all blogs")
        return []


def create_blog(db: Session, data: BlogCreate) -> Blog | None:
    """Persist a new post.

    Args:
        db: Database session
        data: Editorial form data

    Returns:
        The stored post, or None if the store failed

    Raises:
        SlugConflictError: If another post already uses the slug
    """
    repo = BlogRepository(db)
    slug = data.slug or generate_slug(data.title)
    word_count, reading_time = calculate_reading_stats(data.content)
    values: dict[str, Any] = {
        "title": data.title,
        "subtitle": data.subtitle,
        "slug": slug,
        "content": data.content,
        "author": data.author,
        "category": data.category,
        "tags": list(data.tags),
        "thumbnail": data.thumbnail or None,
        "meta_title": data.meta_title or data.title,
        "meta_description": data.meta_description,
        "status": data.status,
        "word_count": word_count,
        "reading_time": reading_time,
    }

    try:
        if repo.slug_exists(slug):
            raise SlugConflictError(f"Slug already in use: {slug}")
        blog = repo.create(values)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise SlugConflictError(f"Slug already in use: {slug}") from exc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating blog %r", data.title)
        return None

    logger.info("Created blog %s (%s, %s)", blog.id, blog.slug, blog.status)
    return blog


def update_blog(db: Session, blog_id: str, data: BlogUpdate) -> Blog | None:
    """Apply an editorial update to an existing post.

    Reading statistics are recomputed whenever the content changes and
    ``updated_at`` is always bumped.

    Returns:
        The updated post, or None if it does not exist or the store failed

    Raises:
        SlugConflictError: If the new slug belongs to another post
    """
    repo = BlogRepository(db)
    values: dict[str, Any] = data.model_dump(exclude_unset=True)
    # Columns that are not nullable keep their value when a null is sent.
    for key in ("title", "subtitle", "content", "author", "category", "tags",
                "meta_title", "meta_description", "status", "slug"):
        if key in values and values[key] is None:
            del values[key]
    if "content" in values:
        values["word_count"], values["reading_time"] = calculate_reading_stats(values["content"])
    values["updated_at"] = utcnow()

    try:
        blog = repo.get_by_id(blog_id)
        if blog is None:
            return None
        slug = values.get("slug")
        if slug is not None and repo.slug_exists(slug, exclude_id=blog_id):
            raise SlugConflictError(f"Slug already in use: {slug}")
        repo.update(blog, values)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise SlugConflictError("Slug already in use") from exc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating blog %s", blog_id)
        return None

    logger.info("Updated blog %s", blog_id)
    return blog


def delete_blog(db: Session, blog_id: str) -> bool:
    """Hard-delete a post with its likes and comments.

    Returns:
        True if a post was deleted
    """
    repo = BlogRepository(db)
    try:
        blog = repo.get_by_id(blog_id)
        if blog is None:
            return False
        repo.delete(blog)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error deleting blog %s", blog_id)
        return False

    logger.info("Deleted blog %s", blog_id)
    return True
