"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import BlogId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> list[Comment]:
        """Find top-level comments, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.blog_id == blog_id and not c.is_reply
        ]
        comments.sort(key=lambda c: c.commented_at, reverse=True)
        return comments[offset : offset + limit]

    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> list[Comment]:
        """Find direct replies, newest first."""
        comments = [c for c in self._comments.values() if c.parent == parent_id]
        comments.sort(key=lambda c: c.commented_at, reverse=True)
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        existing = self._comments.get(comment.id)
        if existing:
            comment = comment.model_copy(update={"children": existing.children})
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        doomed = [cid for cid, c in self._comments.items() if c.blog_id == blog_id]
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)

    async def push_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a reply id."""
        parent = self._comments.get(parent_id)
        if not parent:
            return False
        self._comments[parent_id] = parent.model_copy(
            update={"children": [*parent.children, child_id]}
        )
        return True

    async def pull_child(self, parent_id: CommentId, child_id: CommentId) -> None:
        """Remove a reply id."""
        parent = self._comments.get(parent_id)
        if parent:
            self._comments[parent_id] = parent.model_copy(
                update={"children": [c for c in parent.children if c != child_id]}
            )

    async def count_by_blog(self, blog_id: BlogId, top_level_only: bool = False) -> int:
        """Count the comments of a blog."""
        return sum(
            1
            for c in self._comments.values()
            if c.blog_id == blog_id and not (top_level_only and c.is_reply)
        )
