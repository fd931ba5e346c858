"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

from blog.domain.model import Blog, Comment, User
from blog.domain.service import make_slug
from blog.domain.value import BlogId, CommentId, UserId, Username

CONTENT: dict[str, Any] = {
    "blocks": [{"type": "paragraph", "data": {"text": "Hello there"}}]
}


def make_user(username: str = "alice", **overrides: Any) -> User:
    """Build a password account with sensible defaults."""
    fields: dict[str, Any] = {
        "id": UserId(uuid4()),
        "fullname": f"{username.title()} Example",
        "email": f"{username}@example.com",
        "username": Username(username),
        "password_hash": "not-a-real-hash",
    }
    fields.update(overrides)
    return User(**fields)


def make_blog(author_id: UserId, title: str = "Test blog", **overrides: Any) -> Blog:
    """Build a published blog owned by ``author_id``."""
    fields: dict[str, Any] = {
        "id": BlogId(uuid4()),
        "slug": make_slug(title),
        "title": title,
        "banner": "https://example.com/banner.jpeg",
        "des": "A short description",
        "content": CONTENT,
        "tags": ["testing"],
        "author_id": author_id,
    }
    fields.update(overrides)
    return Blog(**fields)


def make_comment(
    blog: Blog,
    commented_by: UserId,
    text: str = "A comment",
    parent: CommentId | None = None,
    age: int = 0,
) -> Comment:
    """Build a comment on ``blog``; ``age`` seconds in the past."""
    return Comment(
        id=CommentId(uuid4()),
        blog_id=blog.id,
        blog_author=blog.author_id,
        comment=text,
        commented_by=commented_by,
        is_reply=parent is not None,
        parent=parent,
        commented_at=datetime.now() - timedelta(seconds=age),
    )
