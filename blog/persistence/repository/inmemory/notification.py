"""In-memory notification repository for testing."""

from typing import Optional

from blog.domain.model import Notification
from blog.domain.repository import NotificationRepository
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType]
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.notification_for == user_id
            and n.user != user_id
            and (type_filter is None or n.type == type_filter)
        ]

    def _is_like(self, n: Notification, user_id: UserId, blog_id: BlogId) -> bool:
        return n.type == NotificationType.LIKE and n.user == user_id and n.blog == blog_id

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    async def exists_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        return any(
            self._is_like(n, user_id, blog_id) for n in self._notifications.values()
        )

    async def delete_like(self, user_id: UserId, blog_id: BlogId) -> bool:
        for nid, n in self._notifications.items():
            if self._is_like(n, user_id, blog_id):
                del self._notifications[nid]
                return True
        return False

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        doomed = [nid for nid, n in self._notifications.items() if n.comment == comment_id]
        for nid in doomed:
            del self._notifications[nid]
        return len(doomed)

    async def unset_reply(self, comment_id: CommentId) -> int:
        touched = [nid for nid, n in self._notifications.items() if n.reply == comment_id]
        for nid in touched:
            self._notifications[nid] = self._notifications[nid].model_copy(
                update={"reply": None}
            )
        return len(touched)

    async def set_reply(
        self, notification_id: NotificationId, comment_id: CommentId
    ) -> bool:
        notification = self._notifications.get(notification_id)
        if not notification:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"reply": comment_id}
        )
        return True

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        doomed = [nid for nid, n in self._notifications.items() if n.blog == blog_id]
        for nid in doomed:
            del self._notifications[nid]
        return len(doomed)

    async def find_for_recipient(
        self,
        user_id: UserId,
        type_filter: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        notifications = self._for_recipient(user_id, type_filter)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        return len(self._for_recipient(user_id, type_filter))

    async def has_unseen(self, user_id: UserId) -> bool:
        return any(not n.seen for n in self._for_recipient(user_id, None))

    async def mark_seen_for_recipient(
        self, user_id: UserId, type_filter: Optional[NotificationType] = None
    ) -> int:
        unseen = [n for n in self._for_recipient(user_id, type_filter) if not n.seen]
        for n in unseen:
            self._notifications[n.id] = n.model_copy(update={"seen": True})
        return len(unseen)

    async def count_likes(self, blog_id: BlogId) -> int:
        return sum(
            1
            for n in self._notifications.values()
            if n.blog == blog_id and n.type == NotificationType.LIKE
        )
