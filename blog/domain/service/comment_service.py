"""Comment domain service.

Creates comments and replies and fans the event out to the owning blog's
counters and to a notification for the right recipient.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import EmptyCommentError, NotFoundError, ValidationError
from blog.domain.model import Comment
from blog.domain.repository import BlogRepository, CommentRepository
from blog.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            blog_repository: Blog repository
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository
        self.notification_service = notification_service

    async def add_comment(
        self,
        blog_id: BlogId,
        blog_author: UserId | None,
        commenting_user: UserId,
        text: str,
        parent_id: CommentId | None = None,
        notification_id: NotificationId | None = None,
    ) -> Comment:
        """Create a comment on a blog or a reply to another comment.

        Validation happens before anything is written. Once the comment is
        saved, the follow-up steps run in order and a failing step is logged
        without undoing the ones before it:

        1. add the comment to the blog and bump its counters
        2. for a reply, add it to the parent's ``children``
        3. notify the blog author (comment) or the parent's author (reply)
        4. attach the reply to the notification it was written from

        Args:
            blog_id: Blog being commented on
            blog_author: Blog author as sent by the client; the stored
                author is authoritative
            commenting_user: Authenticated commenter
            text: Comment text
            parent_id: Comment being replied to (None for top-level)
            notification_id: Notification whose reply box was used, if any

        Returns:
            The saved comment

        Raises:
            EmptyCommentError: If the text is blank
            NotFoundError: If the blog or parent comment does not exist
            ValidationError: If the parent belongs to another blog
        """
        with logfire.span(
            "comment_service.add_comment",
            blog_id=str(blog_id),
            commenting_user=str(commenting_user),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not text or not text.strip():
                raise EmptyCommentError()

            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Comment on non-existent blog", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))
            if blog_author is not None and blog_author != blog.author_id:
                logfire.warn(
                    "Client sent wrong blog author",
                    blog_id=str(blog_id),
                    sent=str(blog_author),
                    stored=str(blog.author_id),
                )

            parent = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.blog_id != blog_id:
                    logfire.warn(
                        "Parent comment does not belong to blog",
                        parent_id=str(parent_id),
                        parent_blog_id=str(parent.blog_id),
                        target_blog_id=str(blog_id),
                    )
                    raise ValidationError("Parent comment does not belong to this blog")

            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                blog_author=blog.author_id,
                comment=text,
                commented_by=commenting_user,
                is_reply=parent is not None,
                parent=parent.id if parent else None,
                commented_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                blog_id=str(blog_id),
                is_reply=saved.is_reply,
            )

            await self._best_effort(
                "attach_comment_to_blog",
                self.blog_repository.attach_comment(
                    blog_id, saved.id, top_level=parent is None
                ),
                comment_id=str(saved.id),
            )

            recipient = blog.author_id
            if parent:
                recipient = parent.commented_by
                await self._best_effort(
                    "attach_reply_to_parent",
                    self.comment_repository.push_child(parent.id, saved.id),
                    comment_id=str(saved.id),
                    parent_id=str(parent.id),
                )

            await self._best_effort(
                "notify",
                self.notification_service.notify(
                    NotificationType.REPLY if parent else NotificationType.COMMENT,
                    blog_id=blog_id,
                    recipient=recipient,
                    actor=commenting_user,
                    comment_id=saved.id,
                    replied_on_comment=parent.id if parent else None,
                ),
                comment_id=str(saved.id),
            )

            if notification_id:
                await self._best_effort(
                    "attach_reply_to_notification",
                    self.notification_service.attach_reply(notification_id, saved.id),
                    comment_id=str(saved.id),
                    notification_id=str(notification_id),
                )

            return saved

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_blog_comments(
        self, blog_id: BlogId, skip: int, limit: int
    ) -> list[Comment]:
        """Top-level comments of a blog, newest first."""
        with logfire.span(
            "comment_service.get_blog_comments", blog_id=str(blog_id), skip=skip
        ):
            comments = await self.comment_repository.find_top_level(
                blog_id, limit=limit, offset=max(skip, 0)
            )
            logfire.info("Comments retrieved", blog_id=str(blog_id), count=len(comments))
            return comments

    async def get_replies(
        self, comment_id: CommentId, skip: int, limit: int
    ) -> list[Comment]:
        """Direct replies to a comment, newest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_replies", comment_id=str(comment_id), skip=skip
        ):
            await self.get_by_id(comment_id)
            return await self.comment_repository.find_replies(
                comment_id, limit=limit, offset=max(skip, 0)
            )
