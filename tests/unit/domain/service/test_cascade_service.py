"""Unit tests for CascadeDeleteService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, NotFoundError, StoreFailureError
from blog.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from blog.domain.service import (
    CascadeDeleteService,
    CommentService,
    LikeService,
    NotificationService,
)
from blog.domain.value import CommentId, NotificationType, UserId
from blog.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _comment(service: CommentService, blog, user: UserId, text: str, parent=None):
    return await service.add_comment(
        blog_id=blog.id,
        blog_author=blog.author_id,
        commenting_user=user,
        text=text,
        parent_id=parent,
    )


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_comment_reply_scenario(self, unit_env):
        """A comments on B's blog, C replies, deleting A's comment undoes both."""
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        a, b, c = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        blog = await blog_repo.save(make_blog(b))

        a_comment = await _comment(comment_service, blog, a, "Nice")
        assert await notification_repo.count_for_recipient(
            b, NotificationType.COMMENT
        ) == 1
        stored = await blog_repo.find_by_id(blog.id)
        assert (stored.total_comments, stored.total_parent_comments) == (1, 1)

        c_reply = await _comment(comment_service, blog, c, "Agreed", a_comment.id)
        assert await notification_repo.count_for_recipient(
            a, NotificationType.REPLY
        ) == 1
        stored = await blog_repo.find_by_id(blog.id)
        assert (stored.total_comments, stored.total_parent_comments) == (2, 1)
        assert (await comment_repo.find_by_id(a_comment.id)).children == [c_reply.id]

        # Act
        deleted = await cascade_service.delete_comment(a_comment.id, a)

        # Assert
        assert deleted == 2
        assert await comment_repo.find_by_id(a_comment.id) is None
        assert await comment_repo.find_by_id(c_reply.id) is None
        assert await notification_repo.count_for_recipient(b) == 0
        assert await notification_repo.count_for_recipient(a) == 0
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.total_comments == 0
        assert stored.total_parent_comments == 0
        assert stored.comments == []

    @pytest.mark.asyncio
    async def test_deep_subtree_removed(self, unit_env):
        """Every descendant goes, however deep the thread is."""
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        root = await _comment(comment_service, blog, author, "root")
        parent = root
        thread = [root]
        for depth in range(50):
            parent = await _comment(
                comment_service, blog, UserId(uuid4()), f"level {depth}", parent.id
            )
            thread.append(parent)
        sibling = await _comment(comment_service, blog, author, "sibling", root.id)
        survivor = await _comment(comment_service, blog, author, "untouched")

        deleted = await cascade_service.delete_comment(root.id, author)

        assert deleted == len(thread) + 1
        for comment in [*thread, sibling]:
            assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.find_by_id(survivor.id) is not None
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.total_comments == 1
        assert stored.total_parent_comments == 1
        assert stored.comments == [survivor.id]

    @pytest.mark.asyncio
    async def test_deleting_reply_detaches_it_from_parent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author, replier = UserId(uuid4()), UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        parent = await _comment(comment_service, blog, author, "parent")
        keep = await _comment(comment_service, blog, replier, "keep", parent.id)
        drop = await _comment(comment_service, blog, replier, "drop", parent.id)

        await cascade_service.delete_comment(drop.id, replier)

        assert (await comment_repo.find_by_id(parent.id)).children == [keep.id]
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.total_comments == 2
        assert stored.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_reply_from_notification_is_unset_not_deleted(self, unit_env):
        """The notification a reply was written from survives the reply's deletion."""
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author, commenter = UserId(uuid4()), UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        question = await _comment(comment_service, blog, commenter, "Question")
        [notification] = await notification_repo.find_for_recipient(author)

        answer = await comment_service.add_comment(
            blog_id=blog.id,
            blog_author=author,
            commenting_user=author,
            text="Answer",
            parent_id=question.id,
            notification_id=notification.id,
        )
        assert (await notification_repo.find_by_id(notification.id)).reply == answer.id

        await cascade_service.delete_comment(answer.id, author)

        stored = await notification_repo.find_by_id(notification.id)
        assert stored is not None
        assert stored.reply is None

    @pytest.mark.asyncio
    async def test_blog_author_may_delete_any_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        comment = await _comment(comment_service, blog, UserId(uuid4()), "spam")

        assert await cascade_service.delete_comment(comment.id, author) == 1

    @pytest.mark.asyncio
    async def test_stranger_is_forbidden_and_nothing_changes(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        comment = await _comment(comment_service, blog, UserId(uuid4()), "mine")

        with pytest.raises(NotAuthorizedError):
            await cascade_service.delete_comment(comment.id, UserId(uuid4()))

        assert await comment_repo.find_by_id(comment.id) is not None
        assert (await blog_repo.find_by_id(blog.id)).total_comments == 1

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found_and_changes_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        comment = await _comment(comment_service, blog, UserId(uuid4()), "stays")
        before = await blog_repo.find_by_id(blog.id)

        with pytest.raises(NotFoundError):
            await cascade_service.delete_comment(CommentId(uuid4()), author)

        after = await blog_repo.find_by_id(blog.id)
        assert after.total_comments == before.total_comments == 1
        assert after.total_parent_comments == before.total_parent_comments == 1
        assert after.comments == before.comments == [comment.id]
        assert await comment_repo.find_by_id(comment.id) is not None
        assert await notification_repo.count_for_recipient(author, None) == 1


class FlakyNotificationRepository(InMemoryNotificationRepository):
    """Notification store that cannot delete by comment."""

    async def delete_by_comment(self, comment_id):
        raise StoreFailureError("delete_by_comment")


class TestDeleteCommentPartialFailure:
    @pytest.mark.asyncio
    async def test_failed_step_does_not_stop_the_walk(self):
        """Comments are still removed when notification cleanup fails."""
        blog_repo = InMemoryBlogRepository()
        comment_repo = InMemoryCommentRepository()
        notification_repo = FlakyNotificationRepository()
        cascade_service = CascadeDeleteService(
            comment_repository=comment_repo,
            blog_repository=blog_repo,
            user_repository=InMemoryUserRepository(),
            notification_repository=notification_repo,
        )
        comment_service = CommentService(
            comment_repository=comment_repo,
            blog_repository=blog_repo,
            notification_service=NotificationService(notification_repo),
        )

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author))
        root = await _comment(comment_service, blog, UserId(uuid4()), "root")
        child = await _comment(comment_service, blog, UserId(uuid4()), "child", root.id)

        deleted = await cascade_service.delete_comment(root.id, author)

        assert deleted == 2
        assert await comment_repo.find_by_id(child.id) is None
        assert (await blog_repo.find_by_id(blog.id)).total_comments == 0
        # The notification step failed, so its records remain
        assert await notification_repo.count_for_recipient(author) == 1


class TestDeleteBlog:
    """Tests for delete_blog."""

    @pytest.mark.asyncio
    async def test_blog_and_dependents_removed(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        user_repo = await unit_env.get(UserRepository)

        author = await user_repo.save(make_user("author", total_posts=2))
        blog = await blog_repo.save(make_blog(author.id))
        other = await blog_repo.save(make_blog(author.id, title="Other"))
        await user_repo.push_blog(author.id, blog.id)
        await user_repo.push_blog(author.id, other.id)

        reader = UserId(uuid4())
        comment = await _comment(comment_service, blog, reader, "hi")
        await _comment(comment_service, blog, author.id, "hello", comment.id)
        await like_service.toggle_like(blog.id, reader, currently_liked=False)
        kept = await _comment(comment_service, other, reader, "elsewhere")

        deleted = await cascade_service.delete_blog(blog.slug.root, author.id)

        assert deleted.id == blog.id
        assert await blog_repo.find_by_id(blog.id) is None
        assert await comment_repo.count_by_blog(blog.id) == 0
        assert await notification_repo.exists_like(reader, blog.id) is False
        assert await comment_repo.find_by_id(kept.id) is not None

        stored_author = await user_repo.find_by_id(author.id)
        assert stored_author.total_posts == 1
        assert stored_author.blogs == [other.id]

    @pytest.mark.asyncio
    async def test_draft_delete_keeps_post_count(self, unit_env):
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)

        author = await user_repo.save(make_user("drafter", total_posts=1))
        draft = await blog_repo.save(make_blog(author.id, draft=True))

        await cascade_service.delete_blog(draft.slug.root, author.id)

        assert (await user_repo.find_by_id(author.id)).total_posts == 1

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        cascade_service = await unit_env.get(CascadeDeleteService)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await cascade_service.delete_blog(blog.slug.root, UserId(uuid4()))
        assert await blog_repo.find_by_id(blog.id) is not None

    @pytest.mark.asyncio
    async def test_missing_blog_raises_not_found(self, unit_env):
        cascade_service = await unit_env.get(CascadeDeleteService)

        with pytest.raises(NotFoundError):
            await cascade_service.delete_blog("no-such-blog", UserId(uuid4()))
