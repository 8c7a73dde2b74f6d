# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from digix_blog.core.settings import settings
from digix_blog.db.session import Base, enable_sqlite_foreign_keys
from digix_blog.db.session import get_db as app_get_session
from digix_blog.main import app as fastapi_app
from digix_blog.models import Blog, BlogComment, BlogLike
from digix_blog.models.blog import BLOG_STATUS_DRAFT, BLOG_STATUS_PUBLISHED
from digix_blog.models.comment import COMMENT_STATUS_APPROVED, COMMENT_STATUS_PENDING

TEST_DB_URL = "sqlite://"
ADMIN_TOKEN = "test-admin-token"

_SLUG_COUNTER = count(1)
_BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def admin_headers(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Enable the editorial API and return matching authorization headers."""
    monkeypatch.setattr(settings, "admin_api_token", ADMIN_TOKEN)
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture()
def make_blog(db_session: Session) -> Callable[..., Blog]:
    """Return a factory persisting blogs; later calls are created later in time."""

    def _make_blog(**overrides: Any) -> Blog:
        index = next(_SLUG_COUNTER)
        values: dict[str, Any] = {
            "title": f"Post {index}",
            "subtitle": "",
            "slug": f"post-{index}",
            "content": "<p>Farmers read this.</p>",
            "author": "Digix Team",
            "category": "",
            "tags": [],
            "meta_title": f"Post {index}",
            "meta_description": "",
            "status": BLOG_STATUS_PUBLISHED,
            "word_count": 3,
            "reading_time": 1,
            "created_at": _BASE_TIME + timedelta(minutes=index),
            "updated_at": _BASE_TIME + timedelta(minutes=index),
        }
        values.update(overrides)
        blog = Blog(**values)
        db_session.add(blog)
        db_session.flush()
        db_session.refresh(blog)
        return blog

    return _make_blog


@pytest.fixture()
def published_blog(make_blog: Callable[..., Blog]) -> Blog:
    """Create a published post in the Marketing category."""
    return make_blog(
        title="Reaching Farmers Online",
        subtitle="Digital channels that work",
        slug="reaching-farmers-online",
        category="Marketing",
        tags=["b2b", "digital"],
    )


@pytest.fixture()
def draft_blog(make_blog: Callable[..., Blog]) -> Blog:
    """Create an unpublished post."""
    return make_blog(
        title="Upcoming Launch",
        slug="upcoming-launch",
        category="Marketing",
        status=BLOG_STATUS_DRAFT,
    )


@pytest.fixture()
def make_comment(db_session: Session) -> Callable[..., BlogComment]:
    """Return a factory persisting comments with explicit timestamps."""

    def _make_comment(blog: Blog, **overrides: Any) -> BlogComment:
        index = next(_SLUG_COUNTER)
        values: dict[str, Any] = {
            "blog_id": blog.id,
            "user_name": f"Visitor {index}",
            "content": f"Comment {index}",
            "status": COMMENT_STATUS_APPROVED,
            "created_at": _BASE_TIME + timedelta(minutes=index),
        }
        values.update(overrides)
        comment = BlogComment(**values)
        db_session.add(comment)
        db_session.flush()
        db_session.refresh(comment)
        return comment

    return _make_comment


@pytest.fixture()
def pending_comment(make_comment: Callable[..., BlogComment], published_blog: Blog) -> BlogComment:
    """Create a comment awaiting moderation."""
    return make_comment(published_blog, status=COMMENT_STATUS_PENDING)


@pytest.fixture()
def liked_blog(db_session: Session, published_blog: Blog) -> Blog:
    """Published post already liked by ``fp_existing``."""
    db_session.add(BlogLike(blog_id=published_blog.id, user_fingerprint="fp_existing"))
    published_blog.likes_count = 1
    db_session.flush()
    return published_blog
