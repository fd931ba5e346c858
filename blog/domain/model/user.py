"""User aggregate root.

Users sign up with email and password or through federated (Google) login,
and accumulate read and post counters as they publish.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import BlogId, SocialLinks, UserId
from blog.domain.value.types import Username


def default_profile_img(username: str) -> str:
    """Generated avatar used until the user uploads their own image."""
    return f"https://api.dicebear.com/6.x/notionists-neutral/svg?seed={username}"


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is None for accounts created through federated login;
    such accounts can only sign in through the identity provider.
    """

    id: UserId
    fullname: str = Field(min_length=3)
    email: str
    username: Username
    password_hash: Optional[str] = None
    bio: str = Field(default="", max_length=150)
    profile_img: str = ""
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    total_posts: int = 0
    total_reads: int = 0
    google_auth: bool = False
    blogs: List[BlogId] = Field(default_factory=list)
    joined_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
