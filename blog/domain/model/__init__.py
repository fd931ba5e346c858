"""Domain model entities for the blog platform."""

from blog.domain.model.blog import Blog
from blog.domain.model.comment import Comment
from blog.domain.model.notification import Notification
from blog.domain.model.user import User

__all__ = [
    "User",
    "Blog",
    "Comment",
    "Notification",
]
