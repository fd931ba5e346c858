"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.notification import Notification
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Listing and counting for a recipient always exclude notifications the
    recipient caused themselves (``user == notification_for``).
    """

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass

    @abstractmethod
    async def exists_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Whether a ``like`` notification from ``user_id`` on the blog exists."""
        pass

    @abstractmethod
    async def delete_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Delete one ``like`` notification from ``user_id`` on the blog.

        Returns:
            True if a notification was deleted
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete notifications whose ``comment`` is the given comment.

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def unset_reply(self, comment_id: CommentId) -> int:
        """Clear ``reply`` on notifications pointing at the given comment.

        The notifications themselves are kept.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def set_reply(
        self, notification_id: NotificationId, comment_id: CommentId
    ) -> bool:
        """Attach a reply comment to an existing notification.

        Returns:
            True if the notification exists
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification referencing a blog.

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def find_for_recipient(
        self,
        user_id: UserId,
        type_filter: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find notifications addressed to a user, newest first.

        Args:
            user_id: The recipient
            type_filter: Only this type (None for all types)
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        """Count notifications addressed to a user."""
        pass

    @abstractmethod
    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether the user has any unseen notification from someone else."""
        pass

    @abstractmethod
    async def mark_seen_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        """Mark every notification the listing would show as seen.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def count_likes(self, blog_id: BlogId) -> int:
        """Count ``like`` notifications on a blog."""
        pass
