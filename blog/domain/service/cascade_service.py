"""Cascading delete coordinator.

Removes a comment together with its whole reply subtree, or a blog together
with everything that hangs off it, and corrects the counters on the way.
"""

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.model import Blog, Comment
from blog.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from blog.domain.value import CommentId, UserId

from .base import Service


class CascadeDeleteService(Service):
    """Domain service for deleting comments and blogs with their dependents."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize cascade delete service.

        Args:
            comment_repository: Comment repository
            blog_repository: Blog repository
            user_repository: User repository
            notification_repository: Notification repository
        """
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository
        self.user_repository = user_repository
        self.notification_repository = notification_repository

    async def delete_comment(
        self, comment_id: CommentId, requesting_user: UserId
    ) -> int:
        """Delete a comment and all of its descendants.

        Only the comment's author or the blog's author may do this. The
        subtree is walked with an explicit stack in post-order: a node is
        detached from its parent, its notifications and its blog on the first
        visit, its children are deleted next, and its own record goes last.
        Per-node failures are logged and the walk carries on.

        Args:
            comment_id: Root of the subtree to delete
            requesting_user: Authenticated caller

        Returns:
            Number of comment records deleted

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller may not delete it
        """
        with logfire.span(
            "cascade_service.delete_comment",
            comment_id=str(comment_id),
            requesting_user=str(requesting_user),
        ):
            root = await self.comment_repository.find_by_id(comment_id)
            if not root:
                logfire.warn("Delete of non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            if requesting_user not in (root.commented_by, root.blog_author):
                logfire.warn(
                    "Unauthorized comment delete",
                    comment_id=str(comment_id),
                    requesting_user=str(requesting_user),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(requesting_user))

            loaded: dict[CommentId, Comment] = {root.id: root}
            stack: list[tuple[CommentId, bool]] = [(root.id, False)]
            deleted = 0

            while stack:
                current_id, expanded = stack.pop()

                if expanded:
                    if await self._best_effort(
                        "delete_comment_record",
                        self.comment_repository.delete(current_id),
                        comment_id=str(current_id),
                    ):
                        deleted += 1
                    continue

                comment = loaded.pop(current_id, None)
                if comment is None:
                    comment = await self._best_effort(
                        "load_comment",
                        self.comment_repository.find_by_id(current_id),
                        comment_id=str(current_id),
                    )
                if comment is None:
                    logfire.warn("Child comment already gone", comment_id=str(current_id))
                    continue

                await self._detach(comment)

                stack.append((comment.id, True))
                for child_id in reversed(comment.children):
                    stack.append((child_id, False))

            logfire.info(
                "Comment subtree deleted", comment_id=str(comment_id), deleted=deleted
            )
            return deleted

    async def _detach(self, comment: Comment) -> None:
        """Remove every reference to a comment that is about to be deleted."""
        attrs = {"comment_id": str(comment.id)}

        if comment.parent:
            await self._best_effort(
                "pull_from_parent",
                self.comment_repository.pull_child(comment.parent, comment.id),
                **attrs,
            )

        await self._best_effort(
            "delete_comment_notifications",
            self.notification_repository.delete_by_comment(comment.id),
            **attrs,
        )

        await self._best_effort(
            "unset_reply_on_notifications",
            self.notification_repository.unset_reply(comment.id),
            **attrs,
        )

        await self._best_effort(
            "detach_from_blog",
            self.blog_repository.detach_comment(
                comment.blog_id, comment.id, top_level=comment.parent is None
            ),
            **attrs,
        )

    async def delete_blog(self, slug: str, requesting_user: UserId) -> Blog:
        """Delete a blog with its notifications and comments.

        The blog record goes first; the remaining steps are logged
        independently and a failure in one does not stop the others.

        Args:
            slug: Public ``blog_id`` of the blog
            requesting_user: Authenticated caller

        Returns:
            The deleted blog

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "cascade_service.delete_blog",
            slug=slug,
            requesting_user=str(requesting_user),
        ):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                logfire.warn("Delete of non-existent blog", slug=slug)
                raise NotFoundError("Blog", slug)
            if blog.author_id != requesting_user:
                logfire.warn(
                    "Unauthorized blog delete",
                    slug=slug,
                    requesting_user=str(requesting_user),
                )
                raise NotAuthorizedError("blog", slug, str(requesting_user))

            await self.blog_repository.delete(blog.id)
            attrs = {"blog_id": str(blog.id)}

            notifications = await self._best_effort(
                "delete_blog_notifications",
                self.notification_repository.delete_by_blog(blog.id),
                **attrs,
            )
            comments = await self._best_effort(
                "delete_blog_comments",
                self.comment_repository.delete_by_blog(blog.id),
                **attrs,
            )
            await self._best_effort(
                "pull_from_author",
                self.user_repository.pull_blog(blog.author_id, blog.id),
                **attrs,
            )
            if not blog.draft:
                await self._best_effort(
                    "decrement_author_posts",
                    self.user_repository.increment_counters(
                        blog.author_id, total_posts=-1
                    ),
                    **attrs,
                )

            logfire.info(
                "Blog deleted",
                slug=slug,
                notifications_deleted=notifications,
                comments_deleted=comments,
            )
            return blog
