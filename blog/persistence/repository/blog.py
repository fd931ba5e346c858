"""PostgreSQL implementation of Blog repository."""

import re
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import any_, desc, func, select

from blog.domain.model import Blog
from blog.domain.repository import BlogFilter, BlogRepository, BlogSortOrder
from blog.domain.value import BlogId, CommentId, UserId
from blog.persistence.mappers import blog_to_dict, row_to_blog
from blog.persistence.tables import blogs_table

from .base import PostgresRepository

# Written only through the atomic counter/list updates below
_ACTIVITY_FIELDS = (
    "total_likes",
    "total_comments",
    "total_reads",
    "total_parent_comments",
    "comments",
)


class PostgresBlogRepository(PostgresRepository, BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def _apply_filter(self, stmt: Any, criteria: BlogFilter) -> Any:
        stmt = stmt.where(blogs_table.c.draft.is_(False))
        if criteria.tag:
            stmt = stmt.where(any_(blogs_table.c.tags) == criteria.tag)
        if criteria.query:
            stmt = stmt.where(blogs_table.c.title.op("~*")(re.escape(criteria.query)))
        if criteria.author_id:
            stmt = stmt.where(blogs_table.c.author_id == criteria.author_id)
        if criteria.exclude_slug:
            stmt = stmt.where(blogs_table.c.slug != criteria.exclude_slug)
        return stmt

    def _author_filter(
        self, stmt: Any, author_id: UserId, draft: bool, query: str
    ) -> Any:
        stmt = stmt.where(blogs_table.c.author_id == author_id).where(
            blogs_table.c.draft.is_(draft)
        )
        if query:
            stmt = stmt.where(blogs_table.c.title.op("~*")(re.escape(query)))
        return stmt

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self._execute("blogs.find_by_id", stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_by_slug(self, slug: str) -> Optional[Blog]:
        """Find a blog by its public id."""
        stmt = select(blogs_table).where(blogs_table.c.slug == slug)
        result = await self._execute("blogs.find_by_slug", stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_published(
        self,
        criteria: BlogFilter,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published blogs with filtering and pagination."""
        stmt = self._apply_filter(select(blogs_table), criteria)

        if sort == BlogSortOrder.TRENDING:
            stmt = stmt.order_by(
                desc(blogs_table.c.total_reads),
                desc(blogs_table.c.total_likes),
                desc(blogs_table.c.published_at),
            )
        else:
            stmt = stmt.order_by(desc(blogs_table.c.published_at))

        stmt = stmt.limit(limit).offset(offset)
        result = await self._execute("blogs.find_published", stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def count_published(self, criteria: BlogFilter) -> int:
        """Count published blogs matching the filters."""
        stmt = self._apply_filter(
            select(func.count()).select_from(blogs_table), criteria
        )
        result = await self._execute("blogs.count_published", stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        query: str = "",
        limit: int = 2,
        offset: int = 0,
    ) -> List[Blog]:
        """Find an author's blogs, newest first."""
        stmt = self._author_filter(select(blogs_table), author_id, draft, query)
        stmt = stmt.order_by(desc(blogs_table.c.published_at)).limit(limit).offset(offset)
        result = await self._execute("blogs.find_by_author", stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def count_by_author(
        self, author_id: UserId, draft: bool, query: str = ""
    ) -> int:
        """Count an author's blogs."""
        stmt = self._author_filter(
            select(func.count()).select_from(blogs_table), author_id, draft, query
        )
        result = await self._execute("blogs.count_by_author", stmt)
        return result.scalar() or 0

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update)."""
        data = blog_to_dict(blog)
        existing = await self.find_by_id(blog.id)
        if existing:
            for field in _ACTIVITY_FIELDS:
                data.pop(field)
            stmt = (
                blogs_table.update().where(blogs_table.c.id == blog.id).values(**data)
            )
        else:
            stmt = blogs_table.insert().values(**data)
        await self._execute("blogs.save", stmt)
        return await self.find_by_id(blog.id) or blog

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog (hard delete)."""
        stmt = blogs_table.delete().where(blogs_table.c.id == blog_id)
        result = await self._execute("blogs.delete", stmt)
        return result.rowcount > 0

    async def increment_counters(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        """Atomically add deltas to the activity counters."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values(
                total_likes=blogs_table.c.total_likes + total_likes,
                total_comments=blogs_table.c.total_comments + total_comments,
                total_parent_comments=blogs_table.c.total_parent_comments
                + total_parent_comments,
                total_reads=blogs_table.c.total_reads + total_reads,
            )
            .returning(*blogs_table.c)
        )
        result = await self._execute("blogs.increment_counters", stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def set_counters(
        self,
        blog_id: BlogId,
        total_likes: int,
        total_comments: int,
        total_parent_comments: int,
    ) -> None:
        """Overwrite the activity counters."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values(
                total_likes=total_likes,
                total_comments=total_comments,
                total_parent_comments=total_parent_comments,
                updated_at=datetime.now(),
            )
        )
        await self._execute("blogs.set_counters", stmt)

    async def attach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        """Push a comment id and bump the comment counters."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values(
                comments=func.array_append(blogs_table.c.comments, comment_id),
                total_comments=blogs_table.c.total_comments + 1,
                total_parent_comments=blogs_table.c.total_parent_comments
                + (1 if top_level else 0),
            )
        )
        result = await self._execute("blogs.attach_comment", stmt)
        return result.rowcount > 0

    async def detach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        """Pull a comment id and decrement the comment counters."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values(
                comments=func.array_remove(blogs_table.c.comments, comment_id),
                total_comments=blogs_table.c.total_comments - 1,
                total_parent_comments=blogs_table.c.total_parent_comments
                - (1 if top_level else 0),
            )
        )
        result = await self._execute("blogs.detach_comment", stmt)
        return result.rowcount > 0

    async def find_all_ids(self) -> List[BlogId]:
        """IDs of every blog."""
        result = await self._execute("blogs.find_all_ids", select(blogs_table.c.id))
        return [BlogId(row.id) for row in result.fetchall()]
