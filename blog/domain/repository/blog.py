"""Blog repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from blog.domain.model.blog import Blog
from blog.domain.value import BlogId, CommentId, UserId
from blog.domain.value.common import ValueObject


class BlogSortOrder(str, Enum):
    """Sort order for published blog listings."""

    LATEST = "latest"  # published_at DESC
    TRENDING = "trending"  # total_reads, total_likes, published_at DESC


class BlogFilter(ValueObject):
    """Criteria for public blog listings and searches.

    Only published (non-draft) blogs ever match. ``query`` is matched as a
    literal, case-insensitive substring of the title.
    """

    tag: Optional[str] = None
    query: Optional[str] = None
    author_id: Optional[UserId] = None
    exclude_slug: Optional[str] = None


class BlogRepository(ABC):
    """Repository for Blog aggregate.

    Defines the contract for blog persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by its internal ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Blog]:
        """Find a blog by its public ``blog_id`` slug.

        Args:
            slug: The public identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        criteria: BlogFilter,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published blogs with filtering and pagination.

        Args:
            criteria: Tag/title/author filters
            sort: Sort order (latest or trending)
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            List of blogs matching the criteria
        """
        pass

    @abstractmethod
    async def count_published(self, criteria: BlogFilter) -> int:
        """Count published blogs matching the given filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        query: str = "",
        limit: int = 2,
        offset: int = 0,
    ) -> List[Blog]:
        """Find an author's own blogs (drafts or published), newest first.

        Args:
            author_id: The author's user ID
            draft: Whether to list drafts or published blogs
            query: Case-insensitive title substring ("" matches all)
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            List of blogs by the author
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, draft: bool, query: str = ""
    ) -> int:
        """Count an author's blogs with the same filters as ``find_by_author``."""
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Counters and the comment list are only written on create; later
        changes go through the atomic methods below.
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog (hard delete).

        Returns:
            True if a blog was deleted
        """
        pass

    @abstractmethod
    async def increment_counters(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        """Atomically add the given deltas to the blog's activity counters.

        Uses SQL-level increment to avoid lost updates; counters have no
        lower bound.

        Returns:
            The updated blog, or None if the blog does not exist
        """
        pass

    @abstractmethod
    async def set_counters(
        self,
        blog_id: BlogId,
        total_likes: int,
        total_comments: int,
        total_parent_comments: int,
    ) -> None:
        """Overwrite the activity counters with recomputed values."""
        pass

    @abstractmethod
    async def attach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        """Append a comment id to the blog and count it, in one atomic update.

        ``total_comments`` always goes up by one; ``total_parent_comments``
        only for top-level comments.

        Returns:
            True if the blog exists
        """
        pass

    @abstractmethod
    async def detach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        """Remove a comment id from the blog and uncount it, atomically.

        Mirror image of ``attach_comment``.

        Returns:
            True if the blog exists
        """
        pass

    @abstractmethod
    async def find_all_ids(self) -> List[BlogId]:
        """IDs of every stored blog, drafts included."""
        pass
