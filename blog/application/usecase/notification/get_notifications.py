"""Notification use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.common import AuthorSummary, CountResponse
from blog.config import PaginationSettings
from blog.domain.model import Notification
from blog.domain.repository import BlogRepository, CommentRepository
from blog.domain.service import NotificationService, UserService
from blog.domain.value import NotificationType, UserId


class BlogRef(BaseModel):
    """Expanded blog reference."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    blog_id: str
    title: str


class CommentRef(BaseModel):
    """Expanded comment reference."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    comment: str


class NotificationItem(BaseModel):
    """Notification item in response, with its references expanded.

    A reference whose target no longer exists is returned as None.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    type: NotificationType
    seen: bool
    created_at: datetime = Field(alias="createdAt")
    blog: BlogRef | None
    user: AuthorSummary | None
    comment: CommentRef | None
    replied_on_comment: CommentRef | None
    reply: CommentRef | None


class NotificationsRequest(BaseModel):
    """Notifications page request; ``filter`` is a type or ``"all"``."""

    user_id: str  # From authenticated user
    page: int = 1
    filter: str = "all"
    deleted_doc_count: int = 0

    def type_filter(self) -> NotificationType | None:
        return None if self.filter == "all" else NotificationType(self.filter)


class NotificationsResponse(BaseModel):
    """Notifications page response."""

    notifications: list[NotificationItem]


class NewNotificationResponse(BaseModel):
    """Whether unseen notifications exist."""

    new_notification_available: bool


class NotificationsUseCase:
    """Use case for the notification bell and the notifications page."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        blog_repository: BlogRepository,
        comment_repository: CommentRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service, for actor summaries
            blog_repository: Blog repository, for blog references
            comment_repository: Comment repository, for comment references
            pagination: Page sizes
        """
        self.notification_service = notification_service
        self.user_service = user_service
        self.blog_repository = blog_repository
        self.comment_repository = comment_repository
        self.pagination = pagination

    async def has_new(self, user_id: str) -> NewNotificationResponse:
        available = await self.notification_service.has_new(UserId(UUID(user_id)))
        return NewNotificationResponse(new_notification_available=available)

    async def count(self, request: NotificationsRequest) -> CountResponse:
        total = await self.notification_service.count_for_recipient(
            UserId(UUID(request.user_id)), request.type_filter()
        )
        return CountResponse(total_docs=total)

    async def page(self, request: NotificationsRequest) -> NotificationsResponse:
        """One page of notifications; all matching ones are then marked seen."""
        notifications = await self.notification_service.list_for_recipient(
            UserId(UUID(request.user_id)),
            type_filter=request.type_filter(),
            page=request.page,
            page_size=self.pagination.notifications,
            deleted_doc_count=request.deleted_doc_count,
        )
        return NotificationsResponse(
            notifications=[await self._expand(n) for n in notifications]
        )

    async def _expand(self, notification: Notification) -> NotificationItem:
        blog = await self.blog_repository.find_by_id(notification.blog)
        actors = await self.user_service.get_many([notification.user])
        actor = actors.get(notification.user)

        async def comment_ref(comment_id) -> CommentRef | None:
            if not comment_id:
                return None
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                return None
            return CommentRef(id=str(comment.id), comment=comment.comment)

        return NotificationItem(
            id=str(notification.id),
            type=notification.type,
            seen=notification.seen,
            created_at=notification.created_at,
            blog=(
                BlogRef(id=str(blog.id), blog_id=blog.slug.root, title=blog.title)
                if blog
                else None
            ),
            user=AuthorSummary.from_user(actor) if actor else None,
            comment=await comment_ref(notification.comment),
            replied_on_comment=await comment_ref(notification.replied_on_comment),
            reply=await comment_ref(notification.reply),
        )
