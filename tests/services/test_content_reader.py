# mypy: ignore-errors
"""Tests for the published-post reader."""

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import SQLAlchemyError

from digix_blog.services import content_reader


def _post(post_id: str, category: str = "", tags: list[str] | None = None) -> SimpleNamespace:
    return SimpleNamespace(id=post_id, category=category, tags=tags or [])


def test_fetch_post_by_slug_returns_published(db_session, published_blog) -> None:
    """A published post is returned for its exact slug."""
    blog = content_reader.fetch_post_by_slug(db_session, "reaching-farmers-online")
    assert blog is not None
    assert blog.id == published_blog.id


def test_fetch_post_by_slug_hides_drafts(db_session, draft_blog) -> None:
    """Draft posts are reported as not found."""
    assert content_reader.fetch_post_by_slug(db_session, draft_blog.slug) is None


@pytest.mark.parametrize(
    "slug",
    ["missing", "Reaching-Farmers-Online", "reaching-farmers", "reaching-farmers-online/"],
)
def test_fetch_post_by_slug_requires_exact_match(db_session, published_blog, slug) -> None:
    """Only an exact slug match is accepted."""
    assert content_reader.fetch_post_by_slug(db_session, slug) is None


def test_fetch_post_by_slug_backend_error(db_session, mocker, caplog) -> None:
    """Store failures degrade to not-found and are logged."""
    mocker.patch(
        "digix_blog.repositories.blog_repo.BlogRepository.get_published_by_slug",
        side_effect=SQLAlchemyError("connection lost"),
    )
    assert content_reader.fetch_post_by_slug(db_session, "anything") is None
    assert "Error fetching blog by slug" in caplog.text


def test_fetch_post_by_id_hides_drafts(db_session, published_blog, draft_blog) -> None:
    """Lookup by identifier applies the same published filter."""
    assert content_reader.fetch_post_by_id(db_session, published_blog.id) is not None
    assert content_reader.fetch_post_by_id(db_session, draft_blog.id) is None


def test_fetch_all_published_newest_first(db_session, make_blog) -> None:
    """Only published posts are listed, newest first."""
    older = make_blog(title="Older")
    make_blog(title="Hidden", status="draft")
    newer = make_blog(title="Newer")

    blogs = content_reader.fetch_all_published(db_session)

    assert [blog.id for blog in blogs] == [newer.id, older.id]


def test_fetch_all_published_backend_error(db_session, mocker) -> None:
    """Store failures degrade to an empty list."""
    mocker.patch(
        "digix_blog.repositories.blog_repo.BlogRepository.list_published",
        side_effect=SQLAlchemyError("timeout"),
    )
    assert content_reader.fetch_all_published(db_session) == []


def test_fetch_related_same_category_scenario() -> None:
    """A post sharing only the category is related."""
    post_a = _post("a", category="Marketing", tags=["b2b"])
    post_b = _post("b", category="Marketing")

    assert content_reader.fetch_related(post_a, [post_a, post_b]) == [post_b]


def test_fetch_related_shared_tag() -> None:
    """A post sharing a tag but not the category is related."""
    post = _post("a", category="Marketing", tags=["b2b", "seo"])
    tagged = _post("b", category="News", tags=["seo"])
    unrelated = _post("c", category="News", tags=["events"])

    assert content_reader.fetch_related(post, [tagged, unrelated]) == [tagged]


def test_fetch_related_limit_and_order() -> None:
    """At most ``limit`` posts are returned, in source order."""
    post = _post("self", category="Technology")
    candidates = [_post(f"p{i}", category="Technology") for i in range(5)]

    related = content_reader.fetch_related(post, [post, *candidates], 3)

    assert [item.id for item in related] == ["p0", "p1", "p2"]
    assert all(item.id != post.id for item in related)


def test_fetch_related_default_limit() -> None:
    """The default limit comes from settings (3)."""
    post = _post("self", tags=["x"])
    candidates = [_post(f"p{i}", tags=["x"]) for i in range(6)]

    assert len(content_reader.fetch_related(post, candidates)) == 3


def test_fetch_related_empty_category_is_not_shared() -> None:
    """Two uncategorised posts without common tags are not related."""
    post = _post("a")
    other = _post("b")

    assert content_reader.fetch_related(post, [post, other]) == []


def test_fetch_related_properties(db_session, make_blog) -> None:
    """Every suggestion shares a category or a tag and excludes the post."""
    post = make_blog(category="Agriculture", tags=["crops", "kharif"])
    make_blog(category="Agriculture")
    make_blog(category="News", tags=["kharif"])
    make_blog(category="News", tags=["events"])
    make_blog(category="Agriculture", tags=["crops"])
    make_blog(category="Case Studies", tags=["crops"])

    all_published = content_reader.fetch_all_published(db_session)
    related = content_reader.fetch_related(post, all_published, 3)

    assert len(related) == 3
    for item in related:
        assert item.id != post.id
        assert item.category == post.category or set(item.tags) & set(post.tags)
