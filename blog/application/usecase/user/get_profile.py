"""Public profile use cases: profile lookup and user search."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.common import AuthorSummary
from blog.config import PaginationSettings
from blog.domain.service import UserService
from blog.domain.value import SocialLinks


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str


class ProfileResponse(BaseModel):
    """Public profile. Credentials and account flags are never included."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    fullname: str
    username: str
    email: str
    bio: str
    profile_img: str
    social_links: SocialLinks
    total_posts: int
    total_reads: int
    joined_at: datetime = Field(alias="joinedAt")


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str = ""


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[AuthorSummary]


class GetProfileUseCase:
    """Use case for viewing profiles and finding users."""

    def __init__(self, user_service: UserService, pagination: PaginationSettings) -> None:
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Look up a profile by username.

        Raises:
            NotFoundError: If no user has that username
        """
        user = await self.user_service.get_by_username(request.username)
        return ProfileResponse(
            id=str(user.id),
            fullname=user.fullname,
            username=user.username.root,
            email=user.email,
            bio=user.bio,
            profile_img=user.profile_img,
            social_links=user.social_links,
            total_posts=user.total_posts,
            total_reads=user.total_reads,
            joined_at=user.joined_at,
        )

    async def search(self, request: SearchUsersRequest) -> SearchUsersResponse:
        users = await self.user_service.search(
            request.query, self.pagination.search_users
        )
        return SearchUsersResponse(users=[AuthorSummary.from_user(u) for u in users])
