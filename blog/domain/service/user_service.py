"""User domain service."""

from urllib.parse import urlparse

import logfire

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import SocialLinks, UserId

from .base import Service

BIO_LIMIT = 150


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID. Missing users are left out."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def search(self, query: str, limit: int) -> list[User]:
        """Find users whose username contains ``query``."""
        with logfire.span("user_service.search", query=query):
            users = await self.user_repository.search_by_username(query, limit)
            logfire.info("Users searched", query=query, count=len(users))
            return users

    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        bio: str,
        social_links: dict[str, str],
    ) -> User:
        """Update username, bio and social links.

        Every non-empty social link must be an absolute URL whose host
        contains ``<platform>.com``; ``website`` may point anywhere.

        Raises:
            ValidationError: If a field breaks the profile rules
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            if len(username) < 3:
                raise ValidationError("Username should be 3+ characters long")
            if len(bio) > BIO_LIMIT:
                raise ValidationError(f"Bio should not exceed {BIO_LIMIT} characters")

            for platform, link in social_links.items():
                if not link:
                    continue
                hostname = urlparse(link).hostname
                if not hostname:
                    raise ValidationError(
                        "You must provide full social links including https://"
                    )
                if platform != "website" and f"{platform}.com" not in hostname:
                    raise ValidationError("Link is invalid")

            holder = await self.user_repository.find_by_username(username)
            if holder and holder.id != user_id:
                raise ValidationError("Username is already taken")

            updated = await self.user_repository.update_profile(
                user_id,
                username=username,
                bio=bio,
                social_links=SocialLinks.model_validate(social_links),
            )
            if not updated:
                raise NotFoundError("User", str(user_id))
            logfire.info("Profile updated", user_id=str(user_id), username=username)
            return updated

    async def update_profile_img(self, user_id: UserId, url: str) -> str:
        """Replace the user's profile image.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.update_profile_img", user_id=str(user_id)):
            if not await self.user_repository.update_profile_img(user_id, url):
                raise NotFoundError("User", str(user_id))
            logfire.info("Profile image updated", user_id=str(user_id))
            return url
