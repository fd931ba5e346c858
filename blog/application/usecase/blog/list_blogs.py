"""Public blog listing use cases: latest, trending and search."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.common import BlogCard, CountResponse, blog_cards
from blog.config import PaginationSettings
from blog.domain.repository import BlogFilter
from blog.domain.service import BlogService, UserService
from blog.domain.value import UserId


class ListBlogsResponse(BaseModel):
    """One page of blog cards."""

    blogs: list[BlogCard]


class LatestBlogsRequest(BaseModel):
    """Latest blogs request."""

    page: int = 1


class SearchBlogsRequest(BaseModel):
    """Search request: the first of ``tag``, ``query`` and ``author`` wins.

    ``eliminate_blog`` drops one blog from tag results (the one being read
    when listing similar blogs).
    """

    tag: str | None = None
    query: str | None = None
    author: str | None = None
    page: int = 1
    limit: int | None = None
    eliminate_blog: str | None = None

    def to_filter(self) -> BlogFilter:
        if self.tag:
            return BlogFilter(tag=self.tag.lower(), exclude_slug=self.eliminate_blog)
        if self.query:
            return BlogFilter(query=self.query)
        if self.author:
            return BlogFilter(author_id=UserId(UUID(self.author)))
        return BlogFilter()


class ListBlogsUseCase:
    """Use case for the public, published-only blog listings."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service, for author summaries
            pagination: Page sizes
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def latest(self, request: LatestBlogsRequest) -> ListBlogsResponse:
        blogs = await self.blog_service.latest(
            request.page, self.pagination.latest_blogs
        )
        authors = await self.user_service.get_many([b.author_id for b in blogs])
        return ListBlogsResponse(blogs=blog_cards(blogs, authors))

    async def trending(self) -> ListBlogsResponse:
        blogs = await self.blog_service.trending(self.pagination.trending_blogs)
        authors = await self.user_service.get_many([b.author_id for b in blogs])
        return ListBlogsResponse(blogs=blog_cards(blogs, authors))

    async def count_latest(self) -> CountResponse:
        return CountResponse(total_docs=await self.blog_service.count(BlogFilter()))

    async def search(self, request: SearchBlogsRequest) -> ListBlogsResponse:
        """Search published blogs by tag, title or author."""
        blogs = await self.blog_service.search(
            request.to_filter(),
            page=request.page,
            page_size=request.limit or self.pagination.search_blogs,
        )
        authors = await self.user_service.get_many([b.author_id for b in blogs])
        return ListBlogsResponse(blogs=blog_cards(blogs, authors))

    async def count_search(self, request: SearchBlogsRequest) -> CountResponse:
        criteria = request.to_filter().model_copy(update={"exclude_slug": None})
        return CountResponse(total_docs=await self.blog_service.count(criteria))
