"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .blog import BlogCreate, BlogResponse, BlogUpdate
from .interaction import (
    CommentAdminResponse,
    CommentCreate,
    CommentModeration,
    CommentResponse,
    CommentSubmitResponse,
    LikeStatusResponse,
    LikeToggle,
)

__all__ = [
    "BlogCreate", "BlogResponse", "BlogUpdate",
    "CommentAdminResponse", "CommentCreate", "CommentModeration",
    "CommentResponse", "CommentSubmitResponse",
    "LikeStatusResponse", "LikeToggle",
]
