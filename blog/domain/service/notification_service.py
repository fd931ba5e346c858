"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.model import Notification
from blog.domain.repository import NotificationRepository
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for creating and reading notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        type: NotificationType,
        blog_id: BlogId,
        recipient: UserId,
        actor: UserId,
        comment_id: CommentId | None = None,
        replied_on_comment: CommentId | None = None,
    ) -> Notification:
        """Record one event for its recipient.

        Args:
            type: Event kind
            blog_id: Blog the event happened on
            recipient: User the notification is for
            actor: User who caused the event
            comment_id: The new comment or reply, if any
            replied_on_comment: The comment a reply answers, if any

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.notify",
            type=type.value,
            blog_id=str(blog_id),
            recipient=str(recipient),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=type,
                blog=blog_id,
                notification_for=recipient,
                user=actor,
                comment=comment_id,
                replied_on_comment=replied_on_comment,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                type=type.value,
            )
            return saved

    async def attach_reply(
        self, notification_id: NotificationId, comment_id: CommentId
    ) -> bool:
        """Link a reply written from a notification's reply box back to it."""
        attached = await self.notification_repository.set_reply(
            notification_id, comment_id
        )
        if not attached:
            logfire.warn(
                "Notification for reply not found",
                notification_id=str(notification_id),
            )
        return attached

    async def has_new(self, user_id: UserId) -> bool:
        """Whether someone else has notified the user since they last looked."""
        return await self.notification_repository.has_unseen(user_id)

    async def list_for_recipient(
        self,
        user_id: UserId,
        type_filter: NotificationType | None,
        page: int,
        page_size: int,
        deleted_doc_count: int = 0,
    ) -> list[Notification]:
        """One page of the user's notifications, newest first.

        Afterwards every notification matching the recipient and filter is
        marked seen, not only this page. The returned models still carry the
        ``seen`` value they had when read.
        """
        with logfire.span(
            "notification_service.list_for_recipient",
            user_id=str(user_id),
            type_filter=type_filter.value if type_filter else "all",
            page=page,
        ):
            offset = max(page - 1, 0) * page_size - deleted_doc_count
            notifications = await self.notification_repository.find_for_recipient(
                user_id,
                type_filter=type_filter,
                limit=page_size,
                offset=max(offset, 0),
            )
            marked = await self.notification_repository.mark_seen_for_recipient(
                user_id, type_filter
            )
            logfire.info(
                "Notifications listed",
                count=len(notifications),
                marked_seen=marked,
            )
            return notifications

    async def count_for_recipient(
        self, user_id: UserId, type_filter: NotificationType | None
    ) -> int:
        """Count the user's notifications of one type, or all types."""
        return await self.notification_repository.count_for_recipient(
            user_id, type_filter
        )
