"""Public read endpoints for published blog posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from digix_blog.core.settings import settings
from digix_blog.db.session import get_db
from digix_blog.models import Blog
from digix_blog.schemas.blog import BlogResponse
from digix_blog.services import content_reader

router = APIRouter(prefix="/blogs", tags=["blogs"])

SessionDep = Annotated[Session, Depends(get_db)]


def _get_blog_by_slug_or_404(db: Session, slug: str) -> Blog:
    blog = content_reader.fetch_post_by_slug(db, slug)
    if blog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return blog


@router.get("/", response_model=list[BlogResponse])
async def list_blogs(db: SessionDep) -> list[Blog]:
    """List every published post, newest first."""
    return content_reader.fetch_all_published(db)


@router.get("/{slug}", response_model=BlogResponse)
async def get_blog(slug: str, db: SessionDep) -> Blog:
    """Get a published post by its slug.

    Drafts and unknown slugs both answer 404 so unpublished content never
    leaks to visitors.
    """
    return _get_blog_by_slug_or_404(db, slug)


@router.get("/{slug}/related", response_model=list[BlogResponse])
async def get_related_blogs(
    slug: str,
    db: SessionDep,
    limit: int = Query(
        settings.related_posts_limit,
        ge=1,
        le=12,
        description="Maximum number of related posts to return",
    ),
) -> list[Blog]:
    """Get posts sharing a category or tag with the given post."""
    blog = _get_blog_by_slug_or_404(db, slug)
    return content_reader.fetch_related(blog, content_reader.fetch_all_published(db), limit)
