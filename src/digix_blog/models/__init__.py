"""SQLAlchemy models for the Digix blog."""

from .blog import Blog
from .comment import BlogComment
from .like import BlogLike

__all__ = [
    "Blog",
    "BlogComment",
    "BlogLike",
]
