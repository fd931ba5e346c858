"""Authentication routes: password accounts, Google login, password change."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GoogleAuthRequest,
    GoogleAuthUseCase,
    SigninRequest,
    SigninUseCase,
    SignupRequest,
    SignupUseCase,
)
from blog.domain.service import JWTService
from blog.interface.api.gate import current_user_id

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.post("/signup", response_model=AuthResponse)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Create a password account and sign it in."""
    return await signup_use_case.execute(request)


@router.post("/signin", response_model=AuthResponse)
async def signin(
    request: SigninRequest,
    signin_use_case: FromDishka[SigninUseCase],
) -> AuthResponse:
    """Sign in with email and password."""
    return await signin_use_case.execute(request)


@router.post("/google-auth", response_model=AuthResponse)
async def google_auth(
    request: GoogleAuthRequest,
    google_auth_use_case: FromDishka[GoogleAuthUseCase],
) -> AuthResponse:
    """Sign in (or sign up) with a Google ID token.

    Args:
        request: Body carrying the token as ``access_token``
        google_auth_use_case: Google login use case from DI

    Returns:
        Access token and public profile summary
    """
    return await google_auth_use_case.execute(request)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(alias="currentPassword")
    new_password: str = Field(alias="newPassword")


@router.post("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ChangePasswordResponse:
    """Change the caller's password.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
