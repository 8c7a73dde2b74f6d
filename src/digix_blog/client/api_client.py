"""Async HTTP client for the blog API, used by the page controller.

Transport failures and unexpected status codes are raised as
``BackendError``; a missing post is raised as ``BlogNotFoundError``. Comment
submission is the exception: it always resolves to a ``CommentResult`` so the
form can show a message.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from digix_blog.core.settings import settings
from digix_blog.schemas.blog import BlogResponse
from digix_blog.schemas.interaction import CommentResponse
from digix_blog.services.errors import BackendError, BlogNotFoundError
from digix_blog.services.interactions import COMMENT_FAILED_MESSAGE, CommentResult, LikeState

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404


class BlogApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the public blog endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root including the version prefix; defaults to ``API_BASE_URL``.
            timeout: Request timeout in seconds; defaults to ``API_TIMEOUT_SECONDS``.
            client: Optional preconfigured ``httpx.AsyncClient`` (owned by the caller).
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=(base_url or settings.api_base_url).rstrip("/"),
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
        )

    async def __aenter__(self) -> BlogApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Blog API %s %s failed: %s", method, path, exc)
            raise BackendError(f"{method} {path} failed: {exc}") from exc

    async def _get_json(self, path: str, **kwargs: Any) -> Any:
        response = await self._request("GET", path, **kwargs)
        if response.status_code == HTTP_NOT_FOUND:
            raise BlogNotFoundError(path)
        if response.is_error:
            raise BackendError(f"GET {path} returned {response.status_code}")
        return response.json()

    async def fetch_post(self, slug: str) -> BlogResponse:
        """Return the published post for ``slug``."""
        data = await self._get_json(f"/blogs/{slug}")
        return BlogResponse.model_validate(data)

    async def fetch_all_published(self) -> list[BlogResponse]:
        """Return all published posts, newest first."""
        data = await self._get_json("/blogs/")
        return [BlogResponse.model_validate(item) for item in data]

    async def fetch_related(self, slug: str, limit: int | None = None) -> list[BlogResponse]:
        """Return server-computed related posts for ``slug``."""
        params = {"limit": limit} if limit is not None else None
        data = await self._get_json(f"/blogs/{slug}/related", params=params)
        return [BlogResponse.model_validate(item) for item in data]

    async def fetch_comments(self, blog_id: str) -> list[CommentResponse]:
        """Return approved comments for a post, newest first."""
        data = await self._get_json(f"/blogs/{blog_id}/comments")
        return [CommentResponse.model_validate(item) for item in data]

    async def check_like_status(self, blog_id: str, fingerprint: str) -> LikeState:
        """Return the like flag for this browser and the like count."""
        data = await self._get_json(
            f"/blogs/{blog_id}/likes",
            params={"fingerprint": fingerprint},
        )
        return LikeState(liked=bool(data["liked"]), count=int(data["count"]))

    async def toggle_like(self, blog_id: str, fingerprint: str) -> LikeState:
        """Toggle the like for this browser and return the server's state."""
        path = f"/blogs/{blog_id}/likes/toggle"
        response = await self._request("POST", path, json={"fingerprint": fingerprint})
        if response.status_code == HTTP_NOT_FOUND:
            raise BlogNotFoundError(path)
        if response.is_error:
            raise BackendError(f"POST {path} returned {response.status_code}")
        data = response.json()
        return LikeState(liked=bool(data["liked"]), count=int(data["count"]))

    async def submit_comment(
        self,
        blog_id: str,
        name: str,
        content: str,
        email: str | None = None,
    ) -> CommentResult:
        """Submit a comment and return the message to display."""
        payload = {"user_name": name, "content": content, "user_email": email}
        try:
            response = await self._request("POST", f"/blogs/{blog_id}/comments", json=payload)
            data = response.json()
            return CommentResult(success=bool(data["success"]), message=str(data["message"]))
        except (BackendError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Comment submission for blog %s failed: %s", blog_id, exc)
            return CommentResult(success=False, message=COMMENT_FAILED_MESSAGE)
