"""PostgreSQL repository implementations."""

from blog.persistence.repository.blog import PostgresBlogRepository
from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.notification import PostgresNotificationRepository
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
