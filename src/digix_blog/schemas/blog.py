"""Blog post Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BlogStatus = Literal["draft", "published"]


class BlogResponse(BaseModel):
    """Schema for a post returned by the public API.

    ``content`` is editor-authored HTML and is passed through untouched.
    """

    id: str
    title: str
    subtitle: str
    slug: str
    content: str
    author: str
    category: str
    tags: list[str]
    thumbnail: str | None
    meta_title: str
    meta_description: str
    status: BlogStatus
    word_count: int
    reading_time: int
    likes_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BlogCreate(BaseModel):
    """Schema for creating a post through the editorial API."""

    title: str = Field(..., min_length=1, max_length=300)
    subtitle: str = ""
    slug: str | None = Field(None, max_length=255, description="Derived from the title when omitted")
    content: str = ""
    author: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    thumbnail: str | None = None
    meta_title: str | None = Field(None, description="Defaults to the title")
    meta_description: str = ""
    status: BlogStatus = "draft"


class BlogUpdate(BaseModel):
    """Partial update; only fields explicitly sent are applied."""

    title: str | None = Field(None, min_length=1, max_length=300)
    subtitle: str | None = None
    slug: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = None
    author: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    thumbnail: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    status: BlogStatus | None = None
