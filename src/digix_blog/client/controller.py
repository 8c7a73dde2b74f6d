"""View state for a single blog post page.

``BlogPostController`` owns one ``BlogViewState`` per page view and is the
only thing that mutates it. The post itself comes from the server render and
is never replaced; everything else is loaded on ``mount()`` and updated by
the like, comment and share actions. Loading failures degrade silently to
empty lists and unchanged counts.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, Protocol

from digix_blog.core.settings import settings
from digix_blog.schemas.blog import BlogResponse
from digix_blog.schemas.interaction import CommentResponse
from digix_blog.services.content_reader import fetch_related
from digix_blog.services.errors import BlogError
from digix_blog.services.fingerprint import generate_fingerprint
from digix_blog.services.interactions import (
    COMMENT_FAILED_MESSAGE,
    COMMENT_REQUIRED_MESSAGE,
    CommentResult,
    LikeState,
)

logger = logging.getLogger(__name__)

LINK_COPIED_MESSAGE = "Link copied to clipboard!"


class InteractionGateway(Protocol):
    """Calls the controller needs from the backend (see ``BlogApiClient``)."""

    async def fetch_all_published(self) -> list[BlogResponse]: ...

    async def fetch_comments(self, blog_id: str) -> list[CommentResponse]: ...

    async def check_like_status(self, blog_id: str, fingerprint: str) -> LikeState: ...

    async def toggle_like(self, blog_id: str, fingerprint: str) -> LikeState: ...

    async def submit_comment(
        self,
        blog_id: str,
        name: str,
        content: str,
        email: str | None = None,
    ) -> CommentResult: ...


class ShareTarget(Protocol):
    """Platform share capabilities available to the page."""

    can_share: bool

    async def share(self, *, title: str, text: str, url: str) -> None: ...

    async def copy_to_clipboard(self, text: str) -> None: ...

    def notify(self, message: str) -> None: ...


@dataclass(frozen=True)
class ViewMessage:
    """Inline message shown next to the comment form."""

    kind: Literal["success", "error"]
    text: str


@dataclass
class BlogViewState:
    """Mutable view state of a post page; ``post`` is fixed for the session."""

    post: BlogResponse
    related_posts: list[BlogResponse] = field(default_factory=list)
    comments: list[CommentResponse] = field(default_factory=list)
    has_liked: bool = False
    likes_count: int = 0
    is_liking: bool = False
    is_loading: bool = True
    fingerprint: str = ""

    # Comment form
    comment_name: str = ""
    comment_email: str = ""
    comment_content: str = ""
    is_submitting: bool = False
    message: ViewMessage | None = None


class BlogPostController:
    """Mediates visitor actions on a post page.

    Args:
        post: Post as rendered by the server
        gateway: Backend calls, usually a ``BlogApiClient``
        fingerprint_probe: Returns the browser's canvas probe data URL
        page_url: Public URL of the page, derived from ``SITE_URL`` when omitted
    """

    def __init__(
        self,
        post: BlogResponse,
        gateway: InteractionGateway,
        *,
        fingerprint_probe: Callable[[], str],
        page_url: str | None = None,
    ) -> None:
        self._gateway = gateway
        self._fingerprint_probe = fingerprint_probe
        self.page_url = page_url or settings.blog_url(post.slug)
        self.state = BlogViewState(post=post, likes_count=post.likes_count)

    @property
    def post(self) -> BlogResponse:
        """The post this page renders."""
        return self.state.post

    async def mount(self) -> None:
        """Derive the fingerprint and load comments, related posts and like status."""
        self.state.fingerprint = generate_fingerprint(self._fingerprint_probe())
        self.state.is_loading = True
        try:
            await asyncio.gather(
                self._load_related(),
                self._load_comments(),
                self._load_like_status(),
            )
        finally:
            self.state.is_loading = False

    async def _load_related(self) -> None:
        try:
            published = await self._gateway.fetch_all_published()
        except BlogError as exc:
            logger.warning("Could not load related posts for %s: %s", self.post.slug, exc)
            return
        self.state.related_posts = fetch_related(self.post, published)

    async def _load_comments(self) -> None:
        try:
            self.state.comments = await self._gateway.fetch_comments(self.post.id)
        except BlogError as exc:
            logger.warning("Could not load comments for %s: %s", self.post.slug, exc)

    async def _load_like_status(self) -> None:
        if not self.state.fingerprint:
            return
        try:
            like_state = await self._gateway.check_like_status(self.post.id, self.state.fingerprint)
        except BlogError as exc:
            logger.warning("Could not load like status for %s: %s", self.post.slug, exc)
            return
        self.state.has_liked = like_state.liked
        self.state.likes_count = like_state.count

    async def like(self) -> None:
        """Toggle the like; ignored while a toggle is already in flight.

        Local state is replaced with the server's answer, never updated
        optimistically.
        """
        if not self.state.fingerprint or self.state.is_liking:
            return

        self.state.is_liking = True
        try:
            like_state = await self._gateway.toggle_like(self.post.id, self.state.fingerprint)
        except BlogError as exc:
            logger.warning("Like toggle failed for %s: %s", self.post.slug, exc)
            return
        finally:
            self.state.is_liking = False

        self.state.has_liked = like_state.liked
        self.state.likes_count = like_state.count

    async def submit_comment(self) -> None:
        """Submit the comment form.

        The new comment is not added to ``comments``: it stays pending until
        a moderator approves it.
        """
        state = self.state
        if state.is_submitting:
            return

        name = state.comment_name.strip()
        content = state.comment_content.strip()
        if not name or not content:
            state.message = ViewMessage("error", COMMENT_REQUIRED_MESSAGE)
            return

        state.is_submitting = True
        state.message = None
        try:
            result = await self._gateway.submit_comment(
                self.post.id,
                name,
                content,
                state.comment_email.strip() or None,
            )
        except BlogError as exc:
            logger.warning("Comment submission failed for %s: %s", self.post.slug, exc)
            result = CommentResult(success=False, message=COMMENT_FAILED_MESSAGE)
        finally:
            state.is_submitting = False

        if result.success:
            state.message = ViewMessage("success", result.message)
            state.comment_name = ""
            state.comment_email = ""
            state.comment_content = ""
        else:
            state.message = ViewMessage("error", result.message)

    async def share(self, target: ShareTarget) -> None:
        """Share the page natively, or copy its URL when that is unavailable."""
        post = self.post
        if target.can_share:
            try:
                await target.share(
                    title=post.title,
                    text=post.subtitle or post.title,
                    url=self.page_url,
                )
                return
            except Exception as exc:  # platform share may be cancelled or refused
                logger.debug("Native share failed, copying link instead: %s", exc)

        await target.copy_to_clipboard(self.page_url)
        target.notify(LINK_COPIED_MESSAGE)
