"""Like and comment endpoints for published posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from digix_blog.db.session import get_db
from digix_blog.models import Blog, BlogComment
from digix_blog.schemas.interaction import (
    CommentCreate,
    CommentResponse,
    CommentSubmitResponse,
    LikeStatusResponse,
    LikeToggle,
)
from digix_blog.services import content_reader, interactions
from digix_blog.services.errors import CommentValidationError

router = APIRouter(prefix="/blogs", tags=["interactions"])

SessionDep = Annotated[Session, Depends(get_db)]


def _get_published_blog_or_404(db: Session, blog_id: str) -> Blog:
    blog = content_reader.fetch_post_by_id(db, blog_id)
    if blog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return blog


@router.get("/{blog_id}/comments", response_model=list[CommentResponse])
async def list_comments(blog_id: str, db: SessionDep) -> list[BlogComment]:
    """List approved comments for a post, newest first."""
    _get_published_blog_or_404(db, blog_id)
    return interactions.fetch_comments(db, blog_id)


@router.post(
    "/{blog_id}/comments",
    response_model=CommentSubmitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: str,
    comment_data: CommentCreate,
    response: Response,
    db: SessionDep,
) -> CommentSubmitResponse:
    """Submit a comment; it stays pending until a moderator approves it.

    Args:
        blog_id: Identifier of the post
        comment_data: Visitor name, comment text and optional email
        response: Outgoing response, used to set the failure status code
        db: Database session

    Returns:
        Success flag and the message to show next to the form
    """
    _get_published_blog_or_404(db, blog_id)

    try:
        interactions.validate_comment(comment_data.user_name, comment_data.content)
    except CommentValidationError as exc:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return CommentSubmitResponse(success=False, message=str(exc))

    result = interactions.submit_comment(
        db,
        blog_id,
        comment_data.user_name,
        comment_data.content,
        comment_data.user_email,
    )
    if not result.success:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return CommentSubmitResponse(success=result.success, message=result.message)


@router.get("/{blog_id}/likes", response_model=LikeStatusResponse)
async def get_like_status(
    blog_id: str,
    db: SessionDep,
    fingerprint: str = Query(..., min_length=1, max_length=64),
) -> LikeStatusResponse:
    """Get whether this browser likes the post, plus the like count."""
    _get_published_blog_or_404(db, blog_id)
    state = interactions.check_like_status(db, blog_id, fingerprint)
    return LikeStatusResponse(liked=state.liked, count=state.count)


@router.post("/{blog_id}/likes/toggle", response_model=LikeStatusResponse)
async def toggle_like(
    blog_id: str,
    like_data: LikeToggle,
    db: SessionDep,
) -> LikeStatusResponse:
    """Like the post, or remove the like if this browser already liked it."""
    _get_published_blog_or_404(db, blog_id)
    state = interactions.toggle_like(db, blog_id, like_data.fingerprint)
    return LikeStatusResponse(liked=state.liked, count=state.count)
