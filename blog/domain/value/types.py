"""Domain value objects for the blog platform.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject, ValueObject


class NotificationType(str, Enum):
    """Kind of event a notification records."""

    LIKE = "like"
    COMMENT = "comment"
    REPLY = "reply"


class Slug(RootValueObject[str]):
    """Public, human-readable blog identifier (the ``blog_id`` on the wire).

    Built from the title with non-alphanumerics collapsed to hyphens plus a
    random suffix, e.g. ``How-I-Learned-Rust-V1StGXR8_Z5jdHi6B``.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[A-Za-z0-9_-]{1,400}$", v):
            raise ValueError(
                "Blog id must be 1-400 characters of letters, digits, '-' or '_'"
            )
        return v


class Username(RootValueObject[str]):
    """Unique public handle, derived from the email local part on signup."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        if len(v) < 3 or len(v) > 255:
            raise ValueError("Username should be 3+ characters long")
        return v


class SocialLinks(ValueObject):
    """Links shown on a user's profile. Empty string means unset."""

    youtube: str = ""
    instagram: str = ""
    facebook: str = ""
    twitter: str = ""
    github: str = ""
    website: str = ""


class FederatedIdentity(ValueObject):
    """Identity asserted by the federated login provider after verification."""

    email: str
    name: str
    picture: str | None = None
