"""Business logic services for the Digix blog."""

from .errors import (
    BackendError,
    BlogError,
    BlogNotFoundError,
    CommentValidationError,
    SlugConflictError,
)
from .interactions import CommentResult, LikeState

__all__ = [
    "BackendError",
    "BlogError",
    "BlogNotFoundError",
    "CommentResult",
    "CommentValidationError",
    "LikeState",
    "SlugConflictError",
]
