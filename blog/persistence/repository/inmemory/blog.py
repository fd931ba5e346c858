"""In-memory blog repository for testing."""

import re
from typing import Optional

from blog.domain.model import Blog
from blog.domain.repository import BlogFilter, BlogRepository, BlogSortOrder
from blog.domain.value import BlogId, CommentId, UserId


def _title_matches(blog: Blog, query: str) -> bool:
    return not query or re.search(re.escape(query), blog.title, re.IGNORECASE) is not None


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    def _matching(self, criteria: BlogFilter) -> list[Blog]:
        blogs = [b for b in self._blogs.values() if not b.draft]
        if criteria.tag:
            blogs = [b for b in blogs if criteria.tag in b.tags]
        if criteria.query:
            blogs = [b for b in blogs if _title_matches(b, criteria.query)]
        if criteria.author_id:
            blogs = [b for b in blogs if b.author_id == criteria.author_id]
        if criteria.exclude_slug:
            blogs = [b for b in blogs if b.slug.root != criteria.exclude_slug]
        return blogs

    def _by_author(self, author_id: UserId, draft: bool, query: str) -> list[Blog]:
        return [
            b
            for b in self._blogs.values()
            if b.author_id == author_id and b.draft == draft and _title_matches(b, query)
        ]

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        return self._blogs.get(blog_id)

    async def find_by_slug(self, slug: str) -> Optional[Blog]:
        return next((b for b in self._blogs.values() if b.slug.root == slug), None)

    async def find_published(
        self,
        criteria: BlogFilter,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Blog]:
        blogs = self._matching(criteria)
        if sort == BlogSortOrder.TRENDING:
            blogs.sort(
                key=lambda b: (b.total_reads, b.total_likes, b.published_at),
                reverse=True,
            )
        else:
            blogs.sort(key=lambda b: b.published_at, reverse=True)
        return blogs[offset : offset + limit]

    async def count_published(self, criteria: BlogFilter) -> int:
        return len(self._matching(criteria))

    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        query: str = "",
        limit: int = 2,
        offset: int = 0,
    ) -> list[Blog]:
        blogs = self._by_author(author_id, draft, query)
        blogs.sort(key=lambda b: b.published_at, reverse=True)
        return blogs[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, draft: bool, query: str = ""
    ) -> int:
        return len(self._by_author(author_id, draft, query))

    async def save(self, blog: Blog) -> Blog:
        existing = self._blogs.get(blog.id)
        if existing:
            blog = blog.model_copy(
                update={
                    "total_likes": existing.total_likes,
                    "total_comments": existing.total_comments,
                    "total_reads": existing.total_reads,
                    "total_parent_comments": existing.total_parent_comments,
                    "comments": existing.comments,
                }
            )
        self._blogs[blog.id] = blog
        return blog

    async def delete(self, blog_id: BlogId) -> bool:
        return self._blogs.pop(blog_id, None) is not None

    async def increment_counters(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        blog = self._blogs.get(blog_id)
        if not blog:
            return None
        updated = blog.model_copy(
            update={
                "total_likes": blog.total_likes + total_likes,
                "total_comments": blog.total_comments + total_comments,
                "total_parent_comments": blog.total_parent_comments
                + total_parent_comments,
                "total_reads": blog.total_reads + total_reads,
            }
        )
        self._blogs[blog_id] = updated
        return updated

    async def set_counters(
        self,
        blog_id: BlogId,
        total_likes: int,
        total_comments: int,
        total_parent_comments: int,
    ) -> None:
        blog = self._blogs.get(blog_id)
        if blog:
            self._blogs[blog_id] = blog.model_copy(
                update={
                    "total_likes": total_likes,
                    "total_comments": total_comments,
                    "total_parent_comments": total_parent_comments,
                }
            )

    async def attach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        blog = self._blogs.get(blog_id)
        if not blog:
            return False
        self._blogs[blog_id] = blog.model_copy(
            update={
                "comments": [*blog.comments, comment_id],
                "total_comments": blog.total_comments + 1,
                "total_parent_comments": blog.total_parent_comments
                + (1 if top_level else 0),
            }
        )
        return True

    async def detach_comment(
        self, blog_id: BlogId, comment_id: CommentId, top_level: bool
    ) -> bool:
        blog = self._blogs.get(blog_id)
        if not blog:
            return False
        self._blogs[blog_id] = blog.model_copy(
            update={
                "comments": [c for c in blog.comments if c != comment_id],
                "total_comments": blog.total_comments - 1,
                "total_parent_comments": blog.total_parent_comments
                - (1 if top_level else 0),
            }
        )
        return True

    async def find_all_ids(self) -> list[BlogId]:
        return list(self._blogs)
