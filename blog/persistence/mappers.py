"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we map rows by hand
instead of using SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Blog, Comment, Notification, User
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    Slug,
    SocialLinks,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        fullname=row["fullname"],
        email=row["email"],
        username=Username(row["username"]),
        password_hash=row.get("password_hash"),
        bio=row.get("bio") or "",
        profile_img=row.get("profile_img") or "",
        social_links=SocialLinks.model_validate(row.get("social_links") or {}),
        total_posts=row["total_posts"],
        total_reads=row["total_reads"],
        google_auth=row["google_auth"],
        blogs=[BlogId(_uuid(b)) for b in row.get("blogs") or []],
        joined_at=row["joined_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["social_links"] = user.social_links.model_dump()
    return data


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    Args:
        row: Database row as dict

    Returns:
        Blog domain model
    """
    return Blog(
        id=BlogId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        banner=row.get("banner") or "",
        des=row.get("des") or "",
        content=row.get("content") or {},
        tags=list(row.get("tags") or []),
        author_id=UserId(_uuid(row["author_id"])),
        draft=row["draft"],
        total_likes=row["total_likes"],
        total_comments=row["total_comments"],
        total_reads=row["total_reads"],
        total_parent_comments=row["total_parent_comments"],
        comments=[CommentId(_uuid(c)) for c in row.get("comments") or []],
        published_at=row["published_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return blog.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        blog_author=UserId(_uuid(row["blog_author"])),
        comment=row["comment"],
        children=[CommentId(_uuid(c)) for c in row.get("children") or []],
        commented_by=UserId(_uuid(row["commented_by"])),
        is_reply=row["is_reply"],
        parent=_optional_uuid(row.get("parent")),
        commented_at=row["commented_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        blog=BlogId(_uuid(row["blog"])),
        notification_for=UserId(_uuid(row["notification_for"])),
        user=UserId(_uuid(row["user"])),
        comment=_optional_uuid(row.get("comment")),
        reply=_optional_uuid(row.get("reply")),
        replied_on_comment=_optional_uuid(row.get("replied_on_comment")),
        seen=row["seen"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
