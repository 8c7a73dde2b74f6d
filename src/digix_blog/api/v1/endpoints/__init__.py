"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .blogs import router as blogs_router
from .interactions import router as interactions_router

__all__ = [
    "admin_router",
    "blogs_router",
    "interactions_router",
]
