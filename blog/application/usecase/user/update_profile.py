"""Update user profile use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.domain.service import UserService
from blog.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    username: str
    bio: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    username: str


class UpdateProfileImgRequest(BaseModel):
    """Update profile image request."""

    user_id: str  # From authenticated user
    url: str


class UpdateProfileImgResponse(BaseModel):
    """Update profile image response."""

    profile_img: str


class UpdateProfileUseCase:
    """Use case for editing the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            ValidationError: If the username, bio or a link is invalid
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            username=request.username,
            bio=request.bio,
            social_links=request.social_links,
        )
        return UpdateProfileResponse(username=user.username.root)

    async def update_img(self, request: UpdateProfileImgRequest) -> UpdateProfileImgResponse:
        url = await self.user_service.update_profile_img(
            UserId(UUID(request.user_id)), request.url
        )
        return UpdateProfileImgResponse(profile_img=url)
