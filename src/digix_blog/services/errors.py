"""Exceptions shared by the blog service layer."""

from __future__ import annotations


class BlogError(RuntimeError):
    """Base exception raised for blog-related failures."""


class BlogNotFoundError(BlogError):
    """Raised when a post is missing or not published."""


class CommentValidationError(BlogError, ValueError):
    """Raised when a submitted comment fails field validation."""


class BackendError(BlogError):
    """Raised when a store operation fails.

    Wraps the underlying database error so callers outside the service layer
    do not need to depend on SQLAlchemy exception types.
    """


class SlugConflictError(BlogError):
    """Raised when an editorial write would duplicate an existing slug."""
