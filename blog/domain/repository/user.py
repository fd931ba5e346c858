"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.user import User
from blog.domain.value import BlogId, SocialLinks, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users at once (order not guaranteed).

        Used to expand author references in listings without N+1 lookups.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (exact match)."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match)."""
        pass

    @abstractmethod
    async def search_by_username(self, query: str, limit: int) -> List[User]:
        """Find users whose username contains ``query``, case-insensitively.

        Args:
            query: Literal substring to look for
            limit: Maximum number of users to return

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        bio: str,
        social_links: SocialLinks,
    ) -> Optional[User]:
        """Update the editable profile fields.

        Returns:
            The updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def update_profile_img(self, user_id: UserId, url: str) -> bool:
        """Replace the profile image URL. Returns False if no such user."""
        pass

    @abstractmethod
    async def update_password(self, user_id: UserId, password_hash: str) -> bool:
        """Replace the stored password hash. Returns False if no such user."""
        pass

    @abstractmethod
    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> None:
        """Atomically add the given deltas to the user's counters.

        Uses SQL-level increment; negative deltas decrement.
        """
        pass

    @abstractmethod
    async def push_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        """Append a blog id to the user's ``blogs`` list."""
        pass

    @abstractmethod
    async def pull_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        """Remove every occurrence of a blog id from the user's ``blogs`` list."""
        pass
