"""Editorial endpoints for authoring posts and moderating comments."""

import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from digix_blog.core.settings import settings
from digix_blog.db.session import get_db
from digix_blog.models import Blog, BlogComment
from digix_blog.models.blog import BLOG_CATEGORIES
from digix_blog.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from digix_blog.schemas.interaction import CommentAdminResponse, CommentModeration
from digix_blog.services import editorial, interactions
from digix_blog.services.errors import SlugConflictError

bearer_scheme = HTTPBearer()


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> None:
    """Check the bearer token against ``ADMIN_API_TOKEN``.

    Raises:
        HTTPException: If editorial access is not configured or the token is wrong
    """
    expected = settings.admin_api_token
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Editorial API is disabled",
        )
    if not secrets.compare_digest(credentials.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )


router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

SessionDep = Annotated[Session, Depends(get_db)]


def _store_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Blog store unavailable",
    )


@router.get("/blogs", response_model=list[BlogResponse])
async def list_all_blogs(db: SessionDep) -> list[Blog]:
    """List all posts including drafts, newest first."""
    return editorial.get_all_blogs(db)


@router.post("/blogs", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(blog_data: BlogCreate, db: SessionDep) -> Blog:
    """Create a post; the slug is derived from the title when omitted."""
    try:
        blog = editorial.create_blog(db, blog_data)
    except SlugConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if blog is None:
        raise _store_unavailable()
    return blog


@router.get("/blogs/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str, db: SessionDep) -> Blog:
    """Get any post by identifier, drafts included."""
    blog = editorial.get_blog_by_id(db, blog_id)
    if blog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return blog


@router.patch("/blogs/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, blog_data: BlogUpdate, db: SessionDep) -> Blog:
    """Update a post, recomputing reading stats when the content changes."""
    if editorial.get_blog_by_id(db, blog_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    try:
        blog = editorial.update_blog(db, blog_id, blog_data)
    except SlugConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if blog is None:
        raise _store_unavailable()
    return blog


@router.delete("/blogs/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str, db: SessionDep) -> None:
    """Permanently delete a post with its likes and comments."""
    if not editorial.delete_blog(db, blog_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")


@router.patch("/comments/{comment_id}", response_model=CommentAdminResponse)
async def moderate_comment(
    comment_id: str,
    moderation: CommentModeration,
    db: SessionDep,
) -> BlogComment:
    """Approve or reject a visitor comment."""
    comment = interactions.moderate_comment(
        db,
        comment_id,
        moderation.status,
        moderation.moderator,
    )
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return comment


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    """List the suggested post categories for the editor form."""
    return list(BLOG_CATEGORIES)
