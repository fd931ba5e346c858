"""Domain value objects for the blog platform."""

from blog.domain.value.identifiers import (
    BlogId,
    CommentId,
    NotificationId,
    UserId,
)
from blog.domain.value.types import (
    FederatedIdentity,
    NotificationType,
    Slug,
    SocialLinks,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "NotificationId",
    # Types
    "FederatedIdentity",
    "NotificationType",
    "Slug",
    "SocialLinks",
    "Username",
]
