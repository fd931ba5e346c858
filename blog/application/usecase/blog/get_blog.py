"""Get blog use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.common import AuthorSummary, BlogActivity
from blog.domain.service import BlogService, UserService


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: str
    draft: bool = False
    mode: str | None = None  # "edit" skips read counting


class BlogDetail(BaseModel):
    """Full blog for the reader and the editor."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    blog_id: str
    title: str
    des: str
    banner: str
    content: dict[str, Any]
    tags: list[str]
    draft: bool
    activity: BlogActivity
    published_at: datetime
    author_id: str
    author: AuthorSummary | None


class GetBlogResponse(BaseModel):
    """Get blog response."""

    blog: BlogDetail


class GetBlogUseCase:
    """Use case for reading a single blog."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service, for the author summary
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Counts a read for the blog and its author unless the editor is
        loading it.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If it is a draft and no draft was requested
        """
        blog = await self.blog_service.read(
            request.blog_id,
            allow_draft=request.draft,
            count_read=request.mode != "edit",
        )
        authors = await self.user_service.get_many([blog.author_id])
        author = authors.get(blog.author_id)

        return GetBlogResponse(
            blog=BlogDetail(
                id=str(blog.id),
                blog_id=blog.slug.root,
                title=blog.title,
                des=blog.des,
                banner=blog.banner,
                content=blog.content,
                tags=blog.tags,
                draft=blog.draft,
                activity=BlogActivity.from_blog(blog),
                published_at=blog.published_at,
                author_id=str(blog.author_id),
                author=AuthorSummary.from_user(author) if author else None,
            )
        )
