"""Unit tests for BlogService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.repository import (
    BlogFilter,
    BlogRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.service import BlogService, NotificationService, make_slug
from blog.domain.value import BlogId, NotificationType, UserId
from tests.conftest import CONTENT, make_blog, make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PUBLISH = {
    "title": "How I learned Rust",
    "banner": "https://example.com/banner.jpeg",
    "des": "Notes from a month of Rust",
    "content": CONTENT,
    "tags": ["Rust", "Learning"],
    "draft": False,
}


def test_make_slug_collapses_separators():
    slug = make_slug("  How I   learned Rust!! ").root

    assert slug.startswith("How-I-learned-Rust")
    assert len(slug) == len("How-I-learned-Rust") + 21


def test_make_slug_is_unique_per_call():
    assert make_slug("Same title") != make_slug("Same title")


class TestPublish:
    """Tests for create and edit."""

    @pytest.mark.asyncio
    async def test_publish_counts_post_and_links_author(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("writer"))

        blog = await blog_service.publish(author_id=author.id, **PUBLISH)

        assert blog.tags == ["rust", "learning"]
        assert blog.slug.root.startswith("How-I-learned-Rust")
        stored = await user_repo.find_by_id(author.id)
        assert stored.total_posts == 1
        assert stored.blogs == [blog.id]

    @pytest.mark.asyncio
    async def test_draft_skips_description_and_post_count(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("drafter"))

        blog = await blog_service.publish(
            author_id=author.id, **{**PUBLISH, "des": "", "tags": [], "draft": True}
        )

        assert blog.draft is True
        stored = await user_repo.find_by_id(author.id)
        assert stored.total_posts == 0
        assert stored.blogs == [blog.id]

    @pytest.mark.parametrize(
        "override,message",
        [
            ({"title": ""}, "title"),
            ({"banner": ""}, "cover photo"),
            ({"content": {"blocks": []}}, "content"),
            ({"des": ""}, "description"),
            ({"des": "x" * 201}, "description"),
            ({"tags": []}, "tags"),
            ({"tags": [f"t{i}" for i in range(11)]}, "tags"),
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_fields_rejected(self, unit_env, override, message):
        blog_service = await unit_env.get(BlogService)

        with pytest.raises(ValidationError, match=message):
            await blog_service.publish(author_id=UserId(uuid4()), **{**PUBLISH, **override})

    @pytest.mark.asyncio
    async def test_edit_keeps_slug_and_counters(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        author = UserId(uuid4())
        original = await blog_repo.save(make_blog(author, total_likes=3, total_reads=9))

        edited = await blog_service.publish(
            author_id=author, slug=original.slug.root, **{**PUBLISH, "title": "New"}
        )

        assert edited.id == original.id
        assert edited.slug == original.slug
        assert edited.title == "New"
        assert edited.total_likes == 3
        assert edited.total_reads == 9

    @pytest.mark.asyncio
    async def test_edit_publishing_a_draft_counts_post(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("editor"))
        draft = await blog_repo.save(make_blog(author.id, draft=True))

        await blog_service.publish(author_id=author.id, slug=draft.slug.root, **PUBLISH)

        assert (await user_repo.find_by_id(author.id)).total_posts == 1

    @pytest.mark.asyncio
    async def test_edit_of_someone_elses_blog_forbidden(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await blog_service.publish(
                author_id=UserId(uuid4()), slug=blog.slug.root, **PUBLISH
            )

    @pytest.mark.asyncio
    async def test_edit_of_missing_blog_raises_not_found(self, unit_env):
        blog_service = await unit_env.get(BlogService)

        with pytest.raises(NotFoundError):
            await blog_service.publish(
                author_id=UserId(uuid4()), slug="missing-blog", **PUBLISH
            )


class TestRead:
    """Tests for reading and listing."""

    @pytest.mark.asyncio
    async def test_read_counts_for_blog_and_author(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("reader"))
        blog = await blog_repo.save(make_blog(author.id))

        read = await blog_service.read(blog.slug.root, allow_draft=False, count_read=True)

        assert read.total_reads == 1
        assert (await user_repo.find_by_id(author.id)).total_reads == 1

    @pytest.mark.asyncio
    async def test_edit_mode_read_does_not_count(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        read = await blog_service.read(blog.slug.root, allow_draft=True, count_read=False)

        assert read.total_reads == 0

    @pytest.mark.asyncio
    async def test_draft_hidden_unless_requested(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        draft = await blog_repo.save(make_blog(UserId(uuid4()), draft=True))

        with pytest.raises(NotAuthorizedError):
            await blog_service.read(draft.slug.root, allow_draft=False, count_read=True)

        read = await blog_service.read(draft.slug.root, allow_draft=True, count_read=False)
        assert read.id == draft.id

    @pytest.mark.asyncio
    async def test_search_matches_tag_and_literal_query(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        author = UserId(uuid4())
        await blog_repo.save(make_blog(author, title="C++ tips", tags=["cpp"]))
        await blog_repo.save(make_blog(author, title="Cats", tags=["pets"]))
        await blog_repo.save(make_blog(author, title="C++ draft", draft=True))

        by_query = await blog_service.search(BlogFilter(query="c++"), page=1, page_size=5)
        by_tag = await blog_service.search(BlogFilter(tag="pets"), page=1, page_size=5)

        assert [b.title for b in by_query] == ["C++ tips"]
        assert [b.title for b in by_tag] == ["Cats"]
        assert await blog_service.count(BlogFilter()) == 2

    @pytest.mark.asyncio
    async def test_written_by_shifts_page_for_deleted_docs(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        author = UserId(uuid4())
        for i in range(4):
            await blog_repo.save(make_blog(author, title=f"Post {i}"))

        second_page = await blog_service.written_by(
            author, draft=False, query="", page=2, page_size=2, deleted_doc_count=1
        )

        assert len(second_page) == 2
        assert await blog_service.count_written_by(author, draft=False, query="") == 4


class TestReconcileCounters:
    @pytest.mark.asyncio
    async def test_counters_restored_from_records(self, unit_env):
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author, reader = UserId(uuid4()), UserId(uuid4())
        blog = await blog_repo.save(
            make_blog(author, total_comments=10, total_parent_comments=7, total_likes=4)
        )
        top = await comment_repo.save(make_comment(blog, reader))
        await comment_repo.save(make_comment(blog, author, parent=top.id))
        notification_service = await unit_env.get(NotificationService)
        await notification_service.notify(
            NotificationType.LIKE, blog_id=blog.id, recipient=author, actor=reader
        )

        reconciled = await blog_service.reconcile_counters(blog.id)

        assert reconciled.total_comments == 2
        assert reconciled.total_parent_comments == 1
        assert reconciled.total_likes == 1
        stored = await blog_repo.find_by_id(blog.id)
        assert (stored.total_comments, stored.total_parent_comments, stored.total_likes) == (
            2,
            1,
            1,
        )

    @pytest.mark.asyncio
    async def test_missing_blog_raises_not_found(self, unit_env):
        blog_service = await unit_env.get(BlogService)

        with pytest.raises(NotFoundError):
            await blog_service.reconcile_counters(BlogId(uuid4()))
