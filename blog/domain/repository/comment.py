"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import BlogId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find the top-level (non-reply) comments of a blog, newest first.

        Args:
            blog_id: The blog ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment record (hard delete).

        Children are not touched; walking the subtree is the caller's job.

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog.

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def push_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a reply id to the parent's ``children`` list.

        Returns:
            True if the parent exists
        """
        pass

    @abstractmethod
    async def pull_child(self, parent_id: CommentId, child_id: CommentId) -> None:
        """Remove a reply id from the parent's ``children`` list."""
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId, top_level_only: bool = False) -> int:
        """Count the comments of a blog.

        Args:
            blog_id: The blog ID
            top_level_only: Only count comments without a parent

        Returns:
            Number of comments
        """
        pass
