"""JWT token domain service."""

from uuid import UUID

import logfire

from blog.config import AuthSettings
from blog.domain.error import InvalidCredentialError, UnauthenticatedError
from blog.domain.value import UserId
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

BEARER_PREFIX = "Bearer "


class JWTService(Service):
    """Domain service for JWT token operations.

    Also acts as the identity gate: every gated route resolves its caller
    through ``authenticate_bearer``.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, username: str) -> str:
        """Create JWT access token for a user.

        Args:
            user_id: User ID
            username: Username

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), username, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id), username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate_bearer(self, authorization: str | None) -> UserId:
        """Resolve an ``Authorization`` header to the caller's user id.

        Args:
            authorization: Raw header value, e.g. ``"Bearer eyJ..."``

        Returns:
            The authenticated user's ID

        Raises:
            UnauthenticatedError: If no token was presented
            InvalidCredentialError: If the token fails verification
        """
        token = None
        if authorization and authorization.startswith(BEARER_PREFIX):
            token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise UnauthenticatedError()

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            raise InvalidCredentialError(str(e)) from e

        try:
            return UserId(UUID(payload.user_id))
        except ValueError as e:
            raise InvalidCredentialError() from e
