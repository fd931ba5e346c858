"""PostgreSQL implementation of User repository."""

import re
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import BlogId, SocialLinks, UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table

from .base import PostgresRepository


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute("users.find_by_id", stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self._execute("users.find_by_ids", stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self._execute("users.find_by_email", stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self._execute("users.find_by_username", stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def search_by_username(self, query: str, limit: int) -> List[User]:
        """Find users whose username contains the query (case-insensitive)."""
        stmt = (
            select(users_table)
            .where(users_table.c.username.op("~*")(re.escape(query)))
            .order_by(users_table.c.username)
            .limit(limit)
        )
        result = await self._execute("users.search_by_username", stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        data = user_to_dict(user)
        existing = await self.find_by_id(user.id)
        if existing:
            # Counters and the blogs list only change through atomic updates
            for field in ("total_posts", "total_reads", "blogs"):
                data.pop(field)
            stmt = (
                users_table.update().where(users_table.c.id == user.id).values(**data)
            )
        else:
            stmt = users_table.insert().values(**data)
        await self._execute("users.save", stmt)
        return await self.find_by_id(user.id) or user

    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        bio: str,
        social_links: SocialLinks,
    ) -> Optional[User]:
        """Update username, bio and social links."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                username=username,
                bio=bio,
                social_links=social_links.model_dump(),
                updated_at=datetime.now(),
            )
            .returning(*users_table.c)
        )
        result = await self._execute("users.update_profile", stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def update_profile_img(self, user_id: UserId, url: str) -> bool:
        """Replace the profile image URL."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(profile_img=url, updated_at=datetime.now())
        )
        result = await self._execute("users.update_profile_img", stmt)
        return result.rowcount > 0

    async def update_password(self, user_id: UserId, password_hash: str) -> bool:
        """Replace the password hash."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(password_hash=password_hash, updated_at=datetime.now())
        )
        result = await self._execute("users.update_password", stmt)
        return result.rowcount > 0

    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> None:
        """Atomically add deltas to the counters."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                total_posts=users_table.c.total_posts + total_posts,
                total_reads=users_table.c.total_reads + total_reads,
            )
        )
        await self._execute("users.increment_counters", stmt)

    async def push_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        """Append a blog id to the user's blogs."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(blogs=func.array_append(users_table.c.blogs, blog_id))
        )
        await self._execute("users.push_blog", stmt)

    async def pull_blog(self, user_id: UserId, blog_id: BlogId) -> None:
        """Remove a blog id from the user's blogs."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(blogs=func.array_remove(users_table.c.blogs, blog_id))
        )
        await self._execute("users.pull_blog", stmt)
