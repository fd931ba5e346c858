"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import AuthService
from blog.domain.value import UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From authenticated user
    current_password: str
    new_password: str


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    status: str


class ChangePasswordUseCase:
    """Use case for changing the password of a password account."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        await self.auth_service.change_password(
            UserId(UUID(request.user_id)),
            current_password=request.current_password,
            new_password=request.new_password,
        )
        return ChangePasswordResponse(status="Password Changed Successfully")
