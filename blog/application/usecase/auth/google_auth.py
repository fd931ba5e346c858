"""Federated (Google) login use case."""

from pydantic import BaseModel

from blog.domain.service import AuthService, JWTService

from .response import AuthResponse


class GoogleAuthRequest(BaseModel):
    """Federated login request.

    ``access_token`` is the ID token the client obtained from the provider.
    """

    access_token: str


class GoogleAuthUseCase:
    """Use case for signing in (or up) through the federated provider."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize federated login use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT service for issuing the access token
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: GoogleAuthRequest) -> AuthResponse:
        """Execute federated login flow.

        Steps:
        1. Verify the provider token and resolve the account
        2. Issue our own access token for it

        Raises:
            InvalidCredentialError: If the provider rejects the token
            ValidationError: If the email belongs to a password account
        """
        user = await self.auth_service.federated_login(request.access_token)
        return AuthResponse.for_user(user, self.jwt_service)
