"""Like domain service."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.repository import BlogRepository, NotificationRepository
from blog.domain.value import BlogId, NotificationType, UserId

from .base import Service
from .notification_service import NotificationService


class LikeService(Service):
    """Domain service for liking and unliking blogs.

    A like is recorded only as a ``like`` notification from the liker, so
    that notification doubles as the like membership record.
    """

    def __init__(
        self,
        blog_repository: BlogRepository,
        notification_repository: NotificationRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize like service.

        Args:
            blog_repository: Blog repository
            notification_repository: Notification repository
            notification_service: Notification domain service
        """
        self.blog_repository = blog_repository
        self.notification_repository = notification_repository
        self.notification_service = notification_service

    async def toggle_like(
        self, blog_id: BlogId, user_id: UserId, currently_liked: bool
    ) -> bool:
        """Flip the caller's like on a blog.

        The caller's ``currently_liked`` flag decides the direction; it is
        not checked against the stored like record.

        Args:
            blog_id: Blog ID
            user_id: Liking user
            currently_liked: Whether the client believes it already likes the blog

        Returns:
            The new liked state (``not currently_liked``)

        Raises:
            NotFoundError: If the blog does not exist
        """
        with logfire.span(
            "like_service.toggle_like",
            blog_id=str(blog_id),
            user_id=str(user_id),
            currently_liked=currently_liked,
        ):
            blog = await self.blog_repository.increment_counters(
                blog_id, total_likes=-1 if currently_liked else 1
            )
            if not blog:
                logfire.warn("Like on non-existent blog", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))

            if currently_liked:
                await self._best_effort(
                    "delete_like_notification",
                    self.notification_repository.delete_like(user_id, blog_id),
                    blog_id=str(blog_id),
                )
            else:
                await self._best_effort(
                    "create_like_notification",
                    self.notification_service.notify(
                        NotificationType.LIKE,
                        blog_id=blog_id,
                        recipient=blog.author_id,
                        actor=user_id,
                    ),
                    blog_id=str(blog_id),
                )

            logfire.info(
                "Like toggled",
                blog_id=str(blog_id),
                liked=not currently_liked,
                total_likes=blog.total_likes,
            )
            return not currently_liked

    async def is_liked_by_user(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Whether the user currently likes the blog."""
        return await self.notification_repository.exists_like(user_id, blog_id)
