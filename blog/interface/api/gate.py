"""Identity gate for protected routes."""

from uuid import UUID

from blog.domain.service import JWTService


def current_user_id(authorization: str | None, jwt_service: JWTService) -> str:
    """Resolve the ``Authorization`` header to the caller's user id.

    Raises:
        UnauthenticatedError: If no bearer token was sent
        InvalidCredentialError: If the token does not verify
    """
    user_id: UUID = jwt_service.authenticate_bearer(authorization)
    return str(user_id)
