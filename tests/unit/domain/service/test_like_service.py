"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotFoundError
from blog.domain.repository import BlogRepository, NotificationRepository
from blog.domain.service import LikeService
from blog.domain.value import BlogId, NotificationType, UserId
from tests.conftest import make_blog
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_like_increments_and_notifies_author(self, unit_env):
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = UserId(uuid4())
        liker = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))

        liked = await like_service.toggle_like(blog.id, liker, currently_liked=False)

        assert liked is True
        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1
        [notification] = await notification_repo.find_for_recipient(author)
        assert notification.type == NotificationType.LIKE
        assert notification.user == liker
        assert await like_service.is_liked_by_user(blog.id, liker) is True

    @pytest.mark.asyncio
    async def test_like_then_unlike_restores_state(self, unit_env):
        """Liking then unliking leaves the count and notifications unchanged."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = UserId(uuid4())
        liker = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author, total_likes=7))

        assert await like_service.toggle_like(blog.id, liker, currently_liked=False)
        assert not await like_service.toggle_like(blog.id, liker, currently_liked=True)

        assert (await blog_repo.find_by_id(blog.id)).total_likes == 7
        assert await notification_repo.exists_like(liker, blog.id) is False
        assert await notification_repo.count_for_recipient(author) == 0

    @pytest.mark.asyncio
    async def test_unlike_leaves_other_users_likes(self, unit_env):
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        first, second = UserId(uuid4()), UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))

        await like_service.toggle_like(blog.id, first, currently_liked=False)
        await like_service.toggle_like(blog.id, second, currently_liked=False)
        await like_service.toggle_like(blog.id, first, currently_liked=True)

        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1
        assert await like_service.is_liked_by_user(blog.id, first) is False
        assert await like_service.is_liked_by_user(blog.id, second) is True

    @pytest.mark.asyncio
    async def test_self_like_counts_but_is_not_listed(self, unit_env):
        """Authors may like their own blog; it never shows in their notifications."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))

        await like_service.toggle_like(blog.id, author, currently_liked=False)

        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1
        assert await like_service.is_liked_by_user(blog.id, author) is True
        assert await notification_repo.find_for_recipient(author) == []

    @pytest.mark.asyncio
    async def test_missing_blog_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                BlogId(uuid4()), UserId(uuid4()), currently_liked=False
            )
