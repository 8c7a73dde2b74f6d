# mypy: ignore-errors
# tests/v1/test_interactions_api.py
"""Tests for like and comment endpoints."""

from fastapi import status
from sqlalchemy import func, select

from digix_blog.models import BlogComment
from digix_blog.models.comment import COMMENT_STATUS_PENDING, COMMENT_STATUS_REJECTED


def _comment_count(db_session) -> int:
    return db_session.execute(select(func.count()).select_from(BlogComment)).scalar_one()


def test_toggle_like_twice(client, published_blog) -> None:
    """The first toggle likes the post and the second removes the like."""
    url = f"/api/v1/blogs/{published_blog.id}/likes/toggle"

    first = client.post(url, json={"fingerprint": "fp_123"})
    assert first.status_code == status.HTTP_200_OK
    assert first.json() == {"liked": True, "count": 1}

    second = client.post(url, json={"fingerprint": "fp_123"})
    assert second.json() == {"liked": False, "count": 0}


def test_like_status(client, liked_blog) -> None:
    url = f"/api/v1/blogs/{liked_blog.id}/likes"

    liked = client.get(url, params={"fingerprint": "fp_existing"})
    other = client.get(url, params={"fingerprint": "fp_other"})

    assert liked.json() == {"liked": True, "count": 1}
    assert other.json() == {"liked": False, "count": 1}


def test_like_status_requires_fingerprint(client, published_blog) -> None:
    response = client.get(f"/api/v1/blogs/{published_blog.id}/likes")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_toggle_like_empty_fingerprint_rejected(client, published_blog) -> None:
    response = client.post(
        f"/api/v1/blogs/{published_blog.id}/likes/toggle", json={"fingerprint": ""}
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_like_on_draft_is_404(client, draft_blog) -> None:
    response = client.post(
        f"/api/v1/blogs/{draft_blog.id}/likes/toggle", json={"fingerprint": "fp_1"}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_submit_comment(client, db_session, published_blog) -> None:
    """A submitted comment is accepted but not visible until approved."""
    response = client.post(
        f"/api/v1/blogs/{published_blog.id}/comments",
        json={"user_name": "Asha", "content": "Very useful", "user_email": "asha@example.com"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["success"] is True

    stored = db_session.execute(select(BlogComment)).scalar_one()
    assert stored.status == COMMENT_STATUS_PENDING

    listing = client.get(f"/api/v1/blogs/{published_blog.id}/comments")
    assert listing.json() == []


def test_submit_comment_empty_name(client, db_session, published_blog) -> None:
    response = client.post(
        f"/api/v1/blogs/{published_blog.id}/comments",
        json={"user_name": "", "content": "hello"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "message": "Name and comment are required"}
    assert _comment_count(db_session) == 0


def test_submit_comment_too_long(client, db_session, published_blog) -> None:
    response = client.post(
        f"/api/v1/blogs/{published_blog.id}/comments",
        json={"user_name": "Ravi", "content": "x" * 1001},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False
    assert _comment_count(db_session) == 0


def test_list_comments_only_approved(client, published_blog, make_comment) -> None:
    approved = make_comment(published_blog, user_name="Meera")
    make_comment(published_blog, status=COMMENT_STATUS_PENDING)
    make_comment(published_blog, status=COMMENT_STATUS_REJECTED)

    response = client.get(f"/api/v1/blogs/{published_blog.id}/comments")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [comment["id"] for comment in data] == [approved.id]
    assert data[0]["user_name"] == "Meera"
    assert "user_email" not in data[0]


def test_comments_on_unknown_blog_is_404(client) -> None:
    response = client.get("/api/v1/blogs/unknown-id/comments")
    assert response.status_code == status.HTTP_404_NOT_FOUND
