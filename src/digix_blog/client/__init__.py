"""Client-side access to the blog API and the post page controller."""

from .api_client import BlogApiClient
from .controller import BlogPostController, BlogViewState, ViewMessage

__all__ = [
    "BlogApiClient",
    "BlogPostController",
    "BlogViewState",
    "ViewMessage",
]
