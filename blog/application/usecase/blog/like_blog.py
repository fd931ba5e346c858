"""Like toggle use cases."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import LikeService
from blog.domain.value import BlogId, UserId


class LikeBlogRequest(BaseModel):
    """Like toggle request."""

    blog_id: str  # Internal blog id
    user_id: str  # From authenticated user
    currently_liked: bool


class LikeBlogResponse(BaseModel):
    """Like toggle response: the new liked state."""

    model_config = ConfigDict(populate_by_name=True)

    liked_by_user: bool = Field(alias="likedByUser")


class IsLikedRequest(BaseModel):
    """Like membership request."""

    blog_id: str
    user_id: str


class IsLikedResponse(BaseModel):
    """Like membership response."""

    result: bool


class LikeBlogUseCase(BaseUseCase):
    """Use case for liking or unliking a blog."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like blog use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeBlogRequest) -> LikeBlogResponse:
        """Execute like toggle.

        Raises:
            NotFoundError: If the blog does not exist
        """
        liked = await self.like_service.toggle_like(
            BlogId(UUID(request.blog_id)),
            UserId(UUID(request.user_id)),
            currently_liked=request.currently_liked,
        )
        return LikeBlogResponse(liked_by_user=liked)


class IsLikedUseCase(BaseUseCase):
    """Use case for checking whether the caller likes a blog."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: IsLikedRequest) -> IsLikedResponse:
        liked = await self.like_service.is_liked_by_user(
            BlogId(UUID(request.blog_id)), UserId(UUID(request.user_id))
        )
        return IsLikedResponse(result=liked)
