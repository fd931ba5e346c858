"""Signup use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, JWTService

from .response import AuthResponse


class SignupRequest(BaseModel):
    """Signup request."""

    fullname: str = ""
    email: str = ""
    password: str = ""


class SignupUseCase:
    """Use case for creating a password account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT service for issuing the access token
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Raises:
            ValidationError: If the account rules are broken
        """
        user = await self.auth_service.signup(
            fullname=request.fullname,
            email=request.email,
            password=request.password,
        )
        return AuthResponse.for_user(user, self.jwt_service)
