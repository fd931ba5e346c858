"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """A single like, comment or reply event addressed to one user.

    ``reply`` is attached later when the recipient answers straight from the
    notification; ``replied_on_comment`` is the comment a reply answers.
    """

    id: NotificationId
    type: NotificationType
    blog: BlogId
    notification_for: UserId
    user: UserId
    comment: Optional[CommentId] = None
    reply: Optional[CommentId] = None
    replied_on_comment: Optional[CommentId] = None
    seen: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
