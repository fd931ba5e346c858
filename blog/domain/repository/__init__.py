"""Repository interfaces for the blog platform domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.blog import BlogFilter, BlogRepository, BlogSortOrder
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.notification import NotificationRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "BlogRepository",
    "BlogFilter",
    "BlogSortOrder",
    "CommentRepository",
    "NotificationRepository",
]
