"""Signin use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, JWTService

from .response import AuthResponse


class SigninRequest(BaseModel):
    """Signin request."""

    email: str = ""
    password: str = ""


class SigninUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SigninRequest) -> AuthResponse:
        user = await self.auth_service.signin(request.email, request.password)
        return AuthResponse.for_user(user, self.jwt_service)
