"""Delete blog use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CascadeDeleteService
from blog.domain.value import UserId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: str  # Public blog id
    user_id: str  # From authenticated user


class DeleteBlogResponse(BaseModel):
    """Delete blog response."""

    message: str


class DeleteBlogUseCase(BaseUseCase):
    """Use case for deleting a blog with its comments and notifications."""

    def __init__(self, cascade_service: CascadeDeleteService) -> None:
        """Initialize delete blog use case.

        Args:
            cascade_service: Cascading delete coordinator
        """
        self.cascade_service = cascade_service

    async def execute(self, request: DeleteBlogRequest) -> DeleteBlogResponse:
        """Execute delete blog flow.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the caller is not the author
        """
        await self.cascade_service.delete_blog(
            request.blog_id, UserId(UUID(request.user_id))
        )
        return DeleteBlogResponse(message="Blog and related data deleted successfully")
