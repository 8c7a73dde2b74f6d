"""Version 1 API endpoints."""

from .endpoints import admin_router, blogs_router, interactions_router

__all__ = [
    "admin_router",
    "blogs_router",
    "interactions_router",
]
