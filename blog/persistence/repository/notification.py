"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, exists, func, select

from blog.domain.model import Notification
from blog.domain.repository import NotificationRepository
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)
from blog.persistence.mappers import notification_to_dict, row_to_notification
from blog.persistence.tables import notifications_table

from .base import PostgresRepository

_t = notifications_table


class PostgresNotificationRepository(PostgresRepository, NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def _recipient_filter(
        self, stmt, user_id: UserId, type_filter: Optional[NotificationType]
    ):
        # Self-actions (liking your own blog, replying to yourself) are hidden
        stmt = stmt.where(_t.c.notification_for == user_id).where(_t.c.user != user_id)
        if type_filter:
            stmt = stmt.where(_t.c.type == type_filter.value)
        return stmt

    def _like_filter(self, user_id: UserId, blog_id: BlogId):
        return (
            (_t.c.user == user_id)
            & (_t.c.blog == blog_id)
            & (_t.c.type == NotificationType.LIKE.value)
        )

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(_t).where(_t.c.id == notification_id)
        result = await self._execute("notifications.find_by_id", stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        data = notification_to_dict(notification)
        existing = await self.find_by_id(notification.id)
        if existing:
            stmt = _t.update().where(_t.c.id == notification.id).values(**data)
        else:
            stmt = _t.insert().values(**data)
        await self._execute("notifications.save", stmt)
        return await self.find_by_id(notification.id) or notification

    async def exists_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Whether the user's like notification on the blog exists."""
        stmt = select(exists().where(self._like_filter(user_id, blog_id)))
        result = await self._execute("notifications.exists_like", stmt)
        return bool(result.scalar())

    async def delete_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Delete one like notification of the user on the blog."""
        target = (
            select(_t.c.id).where(self._like_filter(user_id, blog_id)).limit(1)
        ).scalar_subquery()
        stmt = _t.delete().where(_t.c.id == target)
        result = await self._execute("notifications.delete_like", stmt)
        return result.rowcount > 0

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete notifications about the comment."""
        stmt = _t.delete().where(_t.c.comment == comment_id)
        result = await self._execute("notifications.delete_by_comment", stmt)
        return result.rowcount

    async def unset_reply(self, comment_id: CommentId) -> int:
        """Clear reply references to the comment."""
        stmt = _t.update().where(_t.c.reply == comment_id).values(reply=None)
        result = await self._execute("notifications.unset_reply", stmt)
        return result.rowcount

    async def set_reply(
        self, notification_id: NotificationId, comment_id: CommentId
    ) -> bool:
        """Attach a reply to a notification."""
        stmt = _t.update().where(_t.c.id == notification_id).values(reply=comment_id)
        result = await self._execute("notifications.set_reply", stmt)
        return result.rowcount > 0

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification about the blog."""
        stmt = _t.delete().where(_t.c.blog == blog_id)
        result = await self._execute("notifications.delete_by_blog", stmt)
        return result.rowcount

    async def find_for_recipient(
        self,
        user_id: UserId,
        type_filter: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find the recipient's notifications, newest first."""
        stmt = self._recipient_filter(select(_t), user_id, type_filter)
        stmt = stmt.order_by(desc(_t.c.created_at)).limit(limit).offset(offset)
        result = await self._execute("notifications.find_for_recipient", stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        """Count the recipient's notifications."""
        stmt = self._recipient_filter(
            select(func.count()).select_from(_t), user_id, type_filter
        )
        result = await self._execute("notifications.count_for_recipient", stmt)
        return result.scalar() or 0

    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether any unseen notification from someone else exists."""
        condition = (
            (_t.c.notification_for == user_id)
            & (_t.c.user != user_id)
            & (_t.c.seen.is_(False))
        )
        result = await self._execute(
            "notifications.has_unseen", select(exists().where(condition))
        )
        return bool(result.scalar())

    async def mark_seen_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        """Mark the recipient's unseen notifications as seen."""
        stmt = self._recipient_filter(_t.update(), user_id, type_filter)
        stmt = stmt.where(_t.c.seen.is_(False)).values(seen=True)
        result = await self._execute("notifications.mark_seen_for_recipient", stmt)
        return result.rowcount

    async def count_likes(self, blog_id: BlogId) -> int:
        """Count like notifications on the blog."""
        stmt = (
            select(func.count())
            .select_from(_t)
            .where(_t.c.blog == blog_id)
            .where(_t.c.type == NotificationType.LIKE.value)
        )
        result = await self._execute("notifications.count_likes", stmt)
        return result.scalar() or 0
