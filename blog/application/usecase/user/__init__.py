"""User use cases."""

from .get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    SearchUsersRequest,
    SearchUsersResponse,
)
from .update_profile import (
    UpdateProfileImgRequest,
    UpdateProfileImgResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "UpdateProfileImgRequest",
    "UpdateProfileImgResponse",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
