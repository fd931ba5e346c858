"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import BlogId, CommentId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table

from .base import PostgresRepository


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute("comments.find_by_id", stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find top-level comments of a blog, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .where(comments_table.c.is_reply.is_(False))
            .order_by(desc(comments_table.c.commented_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute("comments.find_top_level", stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent == parent_id)
            .order_by(desc(comments_table.c.commented_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute("comments.find_replies", stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        data = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)
        if existing:
            # children only change through push_child/pull_child
            data.pop("children")
            data["updated_at"] = datetime.now()
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**data)
            )
        else:
            stmt = comments_table.insert().values(**data)
        await self._execute("comments.save", stmt)
        return await self.find_by_id(comment.id) or comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self._execute("comments.delete", stmt)
        return result.rowcount > 0

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        stmt = comments_table.delete().where(comments_table.c.blog_id == blog_id)
        result = await self._execute("comments.delete_by_blog", stmt)
        return result.rowcount

    async def push_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a reply id to the parent's children."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == parent_id)
            .values(children=func.array_append(comments_table.c.children, child_id))
        )
        result = await self._execute("comments.push_child", stmt)
        return result.rowcount > 0

    async def pull_child(self, parent_id: CommentId, child_id: CommentId) -> None:
        """Remove a reply id from the parent's children."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == parent_id)
            .values(children=func.array_remove(comments_table.c.children, child_id))
        )
        await self._execute("comments.pull_child", stmt)

    async def count_by_blog(self, blog_id: BlogId, top_level_only: bool = False) -> int:
        """Count the comments of a blog."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.blog_id == blog_id)
        )
        if top_level_only:
            stmt = stmt.where(comments_table.c.parent.is_(None))
        result = await self._execute("comments.count_by_blog", stmt)
        return result.scalar() or 0
