"""Create (or edit) blog use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from blog.domain.service import BlogService
from blog.domain.value import UserId


class CreateBlogRequest(BaseModel):
    """Create blog request.

    ``id`` is the public ``blog_id`` of an existing blog to edit; omit it to
    create a new one.
    """

    author_id: str  # From authenticated user
    title: str = ""
    banner: str = ""
    des: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    draft: bool = False
    id: str | None = None


class CreateBlogResponse(BaseModel):
    """Create blog response."""

    id: str


class CreateBlogUseCase:
    """Use case for publishing, saving a draft of, or editing a blog."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: CreateBlogRequest) -> CreateBlogResponse:
        """Execute create blog flow.

        Returns:
            The public ``blog_id`` of the created or edited blog

        Raises:
            ValidationError: If required fields are missing
            NotFoundError: If the blog to edit does not exist
            NotAuthorizedError: If the blog to edit belongs to someone else
        """
        blog = await self.blog_service.publish(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            banner=request.banner,
            des=request.des,
            content=request.content,
            tags=request.tags,
            draft=request.draft,
            slug=request.id,
        )
        return CreateBlogResponse(id=blog.slug.root)
