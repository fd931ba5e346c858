"""Dashboard listing of the caller's own blogs."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.common import BlogCard, CountResponse
from blog.config import PaginationSettings
from blog.domain.service import BlogService
from blog.domain.value import UserId


class UserBlogsRequest(BaseModel):
    """User blogs request."""

    user_id: str  # From authenticated user
    page: int = 1
    draft: bool = False
    query: str = ""
    deleted_doc_count: int = 0


class UserBlogsResponse(BaseModel):
    """User blogs response."""

    blogs: list[BlogCard]


class UserBlogsUseCase:
    """Use case for listing and counting the caller's drafts or published blogs."""

    def __init__(self, blog_service: BlogService, pagination: PaginationSettings) -> None:
        self.blog_service = blog_service
        self.pagination = pagination

    async def execute(self, request: UserBlogsRequest) -> UserBlogsResponse:
        blogs = await self.blog_service.written_by(
            UserId(UUID(request.user_id)),
            draft=request.draft,
            query=request.query,
            page=request.page,
            page_size=self.pagination.user_blogs,
            deleted_doc_count=request.deleted_doc_count,
        )
        return UserBlogsResponse(blogs=[BlogCard.from_blog(blog) for blog in blogs])

    async def count(self, request: UserBlogsRequest) -> CountResponse:
        total = await self.blog_service.count_written_by(
            UserId(UUID(request.user_id)), draft=request.draft, query=request.query
        )
        return CountResponse(total_docs=total)
