"""Likes and moderated comments attached to blog posts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from digix_blog.core.settings import settings
from digix_blog.db.time import utcnow
from digix_blog.models import BlogComment
from digix_blog.models.comment import COMMENT_STATUS_APPROVED, COMMENT_STATUSES
from digix_blog.repositories.blog_repo import InteractionRepository
from digix_blog.services.errors import CommentValidationError

logger = logging.getLogger(__name__)

COMMENT_REQUIRED_MESSAGE = "Name and comment are required"
COMMENT_SUBMITTED_MESSAGE = "Comment submitted! It will be visible after approval."
COMMENT_FAILED_MESSAGE = "Failed to submit comment. Please try again."


@dataclass(frozen=True)
class LikeState:
    """Like flag for one fingerprint plus the post's total like count."""

    liked: bool
    count: int


@dataclass(frozen=True)
class CommentResult:
    """Outcome of a comment submission, suitable for showing inline."""

    success: bool
    message: str


def toggle_like(db: Session, blog_id: str, fingerprint: str) -> LikeState:
    """Flip the like for ``(blog_id, fingerprint)`` and return the new state.

    The existing row is removed with a single conditional delete; only when
    nothing was removed is a new row inserted. The unique constraint on the
    pair turns a concurrent duplicate insert into ``IntegrityError``; only the
    savepoint around the insert is rolled back and the pair counts as liked.

    Args:
        db: Database session
        blog_id: Identifier of the post
        fingerprint: Browser fingerprint of the visitor

    Returns:
        The resulting liked flag and the recomputed like count
    """
    repo = InteractionRepository(db)
    try:
        if repo.delete_like(blog_id, fingerprint):
            liked = False
        else:
            try:
                with db.begin_nested():
                    repo.insert_like(blog_id, fingerprint)
            except IntegrityError:
                logger.debug("Blog %s already liked by %s", blog_id, fingerprint)
            liked = True

        count = repo.count_likes(blog_id)
        repo.store_likes_count(blog_id, count)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error toggling like for blog %s", blog_id)
        return LikeState(liked=False, count=0)

    logger.debug("Blog %s like toggled to %s (count=%d)", blog_id, liked, count)
    return LikeState(liked=liked, count=count)


def check_like_status(db: Session, blog_id: str, fingerprint: str) -> LikeState:
    """Return whether ``fingerprint`` likes the post, without side effects."""
    repo = InteractionRepository(db)
    try:
        return LikeState(
            liked=repo.has_like(blog_id, fingerprint),
            count=repo.count_likes(blog_id),
        )
    except SQLAlchemyError:
        logger.exception("Error checking like status for blog %s", blog_id)
        return LikeState(liked=False, count=0)


def validate_comment(name: str, content: str) -> tuple[str, str]:
    """Trim and check the visitor-supplied comment fields.

    Returns:
        The trimmed ``(name, content)`` pair

    Raises:
        CommentValidationError: If a field is empty or the content is too long
    """
    name = (name or "").strip()
    content = (content or "").strip()
    if not name or not content:
        raise CommentValidationError(COMMENT_REQUIRED_MESSAGE)

    max_length = settings.comment_max_length
    if len(content) > max_length:
        raise CommentValidationError(f"Comment must be {max_length} characters or fewer")
    return name, content


def submit_comment(
    db: Session,
    blog_id: str,
    name: str,
    content: str,
    email: str | None = None,
) -> CommentResult:
    """Store a new comment in the pending state.

    Comments are never approved here; moderation happens out of band.

    Args:
        db: Database session
        blog_id: Identifier of the post being commented on
        name: Display name of the visitor
        content: Comment text
        email: Optional contact address, stored as NULL when blank

    Returns:
        Success flag and a human-readable message
    """
    try:
        name, content = validate_comment(name, content)
    except CommentValidationError as exc:
        return CommentResult(success=False, message=str(exc))

    email = (email or "").strip() or None
    try:
        comment = InteractionRepository(db).insert_comment(
            blog_id=blog_id,
            user_name=name,
            content=content,
            user_email=email,
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error submitting comment for blog %s", blog_id)
        return CommentResult(success=False, message=COMMENT_FAILED_MESSAGE)

    logger.info("Comment %s submitted for blog %s, awaiting approval", comment.id, blog_id)
    return CommentResult(success=True, message=COMMENT_SUBMITTED_MESSAGE)


def fetch_comments(db: Session, blog_id: str) -> list[BlogComment]:
    """Return the approved comments of a post, newest first."""
    try:
        return InteractionRepository(db).list_approved_comments(blog_id)
    except SQLAlchemyError:
        logger.exception("Error fetching comments for blog %s", blog_id)
        return []


def moderate_comment(
    db: Session,
    comment_id: str,
    status: str,
    moderator: str | None = None,
) -> BlogComment | None:
    """Move a comment to a new moderation status.

    Approving stamps ``approved_at`` and ``approved_by``; any other status
    clears them.

    Returns:
        The updated comment, or None if it does not exist or the write failed

    Raises:
        ValueError: If ``status`` is not a known moderation status
    """
    if status not in COMMENT_STATUSES:
        raise ValueError(f"Unknown comment status: {status}")

    repo = InteractionRepository(db)
    try:
        comment = repo.get_comment(comment_id)
        if comment is None:
            return None
        comment.status = status
        if status == COMMENT_STATUS_APPROVED:
            comment.approved_at = utcnow()
            comment.approved_by = moderator
        else:
            comment.approved_at = None
            comment.approved_by = None
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error moderating comment %s", comment_id)
        return None

    logger.info("Comment %s moved to %s", comment_id, status)
    return comment
