"""Like and comment Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CommentStatus = Literal["pending", "approved", "rejected"]


class LikeToggle(BaseModel):
    """Schema for toggling a like."""

    fingerprint: str = Field(..., min_length=1, max_length=64)


class LikeStatusResponse(BaseModel):
    """Like flag for the requesting browser plus the post's like count."""

    liked: bool
    count: int


class CommentCreate(BaseModel):
    """Schema for submitting a comment.

    Field rules are enforced by the service so the caller always gets a
    readable message instead of a validation error payload.
    """

    user_name: str = ""
    content: str = ""
    user_email: str | None = None


class CommentSubmitResponse(BaseModel):
    """Outcome of a comment submission."""

    success: bool
    message: str


class CommentResponse(BaseModel):
    """Approved comment as shown to visitors."""

    id: str
    blog_id: str
    user_name: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentModeration(BaseModel):
    """Schema for moving a comment between moderation states."""

    status: CommentStatus
    moderator: str | None = None


class CommentAdminResponse(CommentResponse):
    """Comment including moderation fields, for editorial tooling."""

    user_email: str | None
    status: CommentStatus
    approved_at: datetime | None
    approved_by: str | None
