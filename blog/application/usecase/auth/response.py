"""Session response shared by every login flow."""

from pydantic import BaseModel

from blog.domain.model import User
from blog.domain.service import JWTService


class AuthResponse(BaseModel):
    """Access token plus the fields the client shows in its header."""

    access_token: str
    profile_img: str
    username: str
    fullname: str

    @classmethod
    def for_user(cls, user: User, jwt_service: JWTService) -> "AuthResponse":
        return cls(
            access_token=jwt_service.create_token(user.id, user.username.root),
            profile_img=user.profile_img,
            username=user.username.root,
            fullname=user.fullname,
        )
