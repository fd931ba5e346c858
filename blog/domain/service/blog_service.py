"""Blog domain service."""

import re
import secrets
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model import Blog
from blog.domain.repository import (
    BlogFilter,
    BlogRepository,
    BlogSortOrder,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from blog.domain.value import BlogId, Slug, UserId

from .base import Service

DESCRIPTION_LIMIT = 200
MAX_TAGS = 10


def make_slug(title: str) -> Slug:
    """Build a public blog id from a title.

    Non-alphanumerics become separators, runs of whitespace collapse to a
    single hyphen and a random suffix keeps the result unique.
    """
    words = re.sub(r"[^a-zA-Z0-9]", " ", title).strip()
    base = re.sub(r"\s+", "-", words)
    return Slug(base + secrets.token_urlsafe(16)[:21])


class BlogService(Service):
    """Domain service for blog publishing, reading and listing."""

    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
            user_repository: User repository
            comment_repository: Comment repository, for reconciliation
            notification_repository: Notification repository, for reconciliation
        """
        self.blog_repository = blog_repository
        self.user_repository = user_repository
        self.comment_repository = comment_repository
        self.notification_repository = notification_repository

    async def get_by_id(self, blog_id: BlogId) -> Blog:
        """Get blog by internal ID.

        Raises:
            NotFoundError: If blog not found
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if not blog:
            logfire.warn("Blog not found", blog_id=str(blog_id))
            raise NotFoundError("Blog", str(blog_id))
        return blog

    async def get_by_slug(self, slug: str) -> Blog:
        """Get blog by its public ``blog_id``.

        Raises:
            NotFoundError: If blog not found
        """
        blog = await self.blog_repository.find_by_slug(slug)
        if not blog:
            logfire.warn("Blog not found", slug=slug)
            raise NotFoundError("Blog", slug)
        return blog

    async def publish(
        self,
        author_id: UserId,
        title: str,
        banner: str,
        des: str,
        content: dict[str, Any],
        tags: list[str],
        draft: bool,
        slug: str | None = None,
    ) -> Blog:
        """Create a blog, or edit one of the author's blogs when ``slug`` is set.

        Publishing (a new non-draft blog, or an edit that takes a draft
        public) adds one to the author's ``total_posts``.

        Raises:
            ValidationError: If required fields are missing
            NotFoundError: If editing a blog that does not exist
            NotAuthorizedError: If editing someone else's blog
        """
        with logfire.span(
            "blog_service.publish",
            author_id=str(author_id),
            slug=slug,
            draft=draft,
        ):
            if not title:
                raise ValidationError("You must provide a title to publish the blog")
            if not banner:
                raise ValidationError("Please submit a cover photo")
            if not content.get("blocks"):
                raise ValidationError("You forgot to write content in the blog!")
            if not draft:
                if not des or len(des) > DESCRIPTION_LIMIT:
                    raise ValidationError(
                        f"Please type a description within {DESCRIPTION_LIMIT} characters"
                    )
                if not tags or len(tags) > MAX_TAGS:
                    raise ValidationError(
                        f"Check your tags (must be between 1-{MAX_TAGS})"
                    )

            tags = [tag.lower() for tag in tags]

            if slug:
                existing = await self.get_by_slug(slug)
                if existing.author_id != author_id:
                    logfire.warn(
                        "Edit of another author's blog",
                        slug=slug,
                        author_id=str(author_id),
                    )
                    raise NotAuthorizedError("blog", slug, str(author_id))

                updated = existing.model_copy(
                    update={
                        "title": title,
                        "banner": banner,
                        "des": des,
                        "content": content,
                        "tags": tags,
                        "draft": draft,
                        "updated_at": datetime.now(),
                    }
                )
                saved = await self.blog_repository.save(updated)
                if existing.draft and not draft:
                    await self.user_repository.increment_counters(
                        author_id, total_posts=1
                    )
                logfire.info("Blog updated", slug=slug, draft=draft)
                return saved

            blog = Blog(
                id=BlogId(uuid4()),
                slug=make_slug(title),
                title=title,
                banner=banner,
                des=des,
                content=content,
                tags=tags,
                author_id=author_id,
                draft=draft,
                published_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.blog_repository.save(blog)
            await self.user_repository.increment_counters(
                author_id, total_posts=0 if draft else 1
            )
            await self.user_repository.push_blog(author_id, saved.id)
            logfire.info("Blog created", slug=str(saved.slug), draft=draft)
            return saved

    async def read(self, slug: str, allow_draft: bool, count_read: bool) -> Blog:
        """Fetch a blog for display, counting the read unless editing.

        Raises:
            NotFoundError: If blog not found
            NotAuthorizedError: If the blog is a draft and drafts were not asked for
        """
        with logfire.span("blog_service.read", slug=slug, count_read=count_read):
            blog = await self.get_by_slug(slug)
            if blog.draft and not allow_draft:
                raise NotAuthorizedError("draft", slug, "anonymous")

            if count_read:
                blog = (
                    await self.blog_repository.increment_counters(
                        blog.id, total_reads=1
                    )
                    or blog
                )
                await self.user_repository.increment_counters(
                    blog.author_id, total_reads=1
                )
            return blog

    async def latest(self, page: int, page_size: int) -> list[Blog]:
        """Newest published blogs, one page at a time (pages start at 1)."""
        return await self.blog_repository.find_published(
            BlogFilter(),
            sort=BlogSortOrder.LATEST,
            limit=page_size,
            offset=max(page - 1, 0) * page_size,
        )

    async def trending(self, limit: int) -> list[Blog]:
        """Most read, then most liked, published blogs."""
        return await self.blog_repository.find_published(
            BlogFilter(), sort=BlogSortOrder.TRENDING, limit=limit
        )

    async def search(
        self, criteria: BlogFilter, page: int, page_size: int
    ) -> list[Blog]:
        """Published blogs matching a tag, title query or author."""
        with logfire.span("blog_service.search", criteria=criteria.model_dump()):
            blogs = await self.blog_repository.find_published(
                criteria,
                sort=BlogSortOrder.LATEST,
                limit=page_size,
                offset=max(page - 1, 0) * page_size,
            )
            logfire.info("Blogs searched", count=len(blogs))
            return blogs

    async def count(self, criteria: BlogFilter) -> int:
        """Count published blogs matching the criteria."""
        return await self.blog_repository.count_published(criteria)

    async def written_by(
        self,
        author_id: UserId,
        draft: bool,
        query: str,
        page: int,
        page_size: int,
        deleted_doc_count: int = 0,
    ) -> list[Blog]:
        """The author's own blogs for their dashboard.

        ``deleted_doc_count`` shifts the page back by the number of blogs the
        client deleted since loading earlier pages.
        """
        offset = max(page - 1, 0) * page_size - deleted_doc_count
        return await self.blog_repository.find_by_author(
            author_id,
            draft=draft,
            query=query,
            limit=page_size,
            offset=max(offset, 0),
        )

    async def count_written_by(self, author_id: UserId, draft: bool, query: str) -> int:
        """Count the author's own blogs."""
        return await self.blog_repository.count_by_author(author_id, draft, query)

    async def reconcile_counters(self, blog_id: BlogId) -> Blog:
        """Recompute the comment and like counters from stored records.

        Counters drift when concurrent requests race or when a step of a
        multi-document sequence fails; this restores them from the comment
        rows and ``like`` notifications.

        Raises:
            NotFoundError: If blog not found
        """
        with logfire.span("blog_service.reconcile_counters", blog_id=str(blog_id)):
            blog = await self.get_by_id(blog_id)
            total_comments = await self.comment_repository.count_by_blog(blog_id)
            total_parent_comments = await self.comment_repository.count_by_blog(
                blog_id, top_level_only=True
            )
            total_likes = await self.notification_repository.count_likes(blog_id)

            await self.blog_repository.set_counters(
                blog_id,
                total_likes=total_likes,
                total_comments=total_comments,
                total_parent_comments=total_parent_comments,
            )
            if (
                blog.total_comments != total_comments
                or blog.total_parent_comments != total_parent_comments
                or blog.total_likes != total_likes
            ):
                logfire.warn(
                    "Blog counters drifted",
                    blog_id=str(blog_id),
                    stored_comments=blog.total_comments,
                    actual_comments=total_comments,
                    stored_parent_comments=blog.total_parent_comments,
                    actual_parent_comments=total_parent_comments,
                    stored_likes=blog.total_likes,
                    actual_likes=total_likes,
                )
            return blog.model_copy(
                update={
                    "total_comments": total_comments,
                    "total_parent_comments": total_parent_comments,
                    "total_likes": total_likes,
                }
            )
