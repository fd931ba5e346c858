"""In-memory user repository for testing."""

import re
from typing import Optional

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import BlogId, SocialLinks, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def find_by_username(self, username: str) -> Optional[User]:
        return next(
            (u for u in self._users.values() if u.username.root == username), None
        )

    async def search_by_username(self, query: str, limit: int) -> list[User]:
        pattern = re.compile(re.escape(query), re.IGNORECASE)
        users = [u for u in self._users.values() if pattern.search(u.username.root)]
        users.sort(key=lambda u: u.username.root)
        return users[:limit]

    async def save(self, user: User) -> User:
        existing = self._users.get(user.id)
        if existing:
            # Counters and the blogs list only change through atomic updates
            user = user.model_copy(
                update={
                    "total_posts": existing.total_posts,
                    "total_reads": existing.total_reads,
                    "blogs": existing.blogs,
                }
            )
        self._users[user.id] = user
        return user

    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        bio: str,
        social_links: SocialLinks,
    ) -> Optional[User]:
        user = self._users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(
            update={
                "username": Username(username),
                "bio": bio,
                "social_links": social_links,
            }
        )
        self._users[user_id] = updated
        return updated

    async def update_profile_img(self, user_id: UserId, url: str) -> bool:
        return self._update(user_id, profile_img=url)

    async def update_password(self, user_id: UserId, password_hash: str) -> bool:
        return self._update(user_id, password_hash=password_hash)

    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> None:
        user = self._users.get(user_id)
        if user:
            self._update(
                user_id,
                total_posts=user.total_posts + total_posts,
                total_reads=user.total_reads + total_reads,
            )

    async def push_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        user = self._users.get(user_id)
        if user:
            self._update(user_id, blogs=[*user.blogs, blog_id])

    async def pull_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        user = self._users.get(user_id)
        if user:
            self._update(user_id, blogs=[b for b in user.blogs if b != blog_id])

    def _update(self, user_id: UserId, **fields) -> bool:
        user = self._users.get(user_id)
        if not user:
            return False
        self._users[user_id] = user.model_copy(update=fields)
        return True
