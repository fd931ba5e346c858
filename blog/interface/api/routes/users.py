"""User routes: search, profiles and profile edits."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from blog.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    SearchUsersRequest,
    SearchUsersResponse,
    UpdateProfileImgRequest,
    UpdateProfileImgResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from blog.domain.service import JWTService
from blog.interface.api.gate import current_user_id

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.post("/search-user", response_model=SearchUsersResponse)
async def search_user(
    request: SearchUsersRequest,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> SearchUsersResponse:
    """Users whose username contains the query."""
    return await get_profile_use_case.search(request)


@router.post("/get-profile", response_model=ProfileResponse)
async def get_profile(
    request: GetProfileRequest,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Public profile by username."""
    return await get_profile_use_case.execute(request)


class UpdateProfileImgAPIRequest(BaseModel):
    """API request for replacing the caller's profile image."""

    url: str


@router.post("/update-profile-img", response_model=UpdateProfileImgResponse)
async def update_profile_img(
    request: UpdateProfileImgAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileImgResponse:
    """Point the caller's profile image at an uploaded file.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await update_profile_use_case.update_img(
        UpdateProfileImgRequest(user_id=user_id, url=request.url)
    )


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    username: str
    bio: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)


@router.post("/update-profile", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Edit the caller's username, bio and social links.

    Requires authentication.

    Args:
        request: New profile fields
        update_profile_use_case: Update profile use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The username now in effect
    """
    user_id = current_user_id(authorization, jwt_service)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id,
            username=request.username,
            bio=request.bio,
            social_links=request.social_links,
        )
    )
