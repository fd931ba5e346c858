"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
]
