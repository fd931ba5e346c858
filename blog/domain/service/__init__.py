"""Domain services."""

from .auth_service import AuthService, FederatedIdentityVerifier
from .base import Service
from .blog_service import BlogService, make_slug
from .cascade_service import CascadeDeleteService
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .notification_service import NotificationService
from .upload_service import UploadService, UploadUrlSigner
from .user_service import UserService

__all__ = [
    "AuthService",
    "BlogService",
    "CascadeDeleteService",
    "CommentService",
    "FederatedIdentityVerifier",
    "JWTService",
    "LikeService",
    "NotificationService",
    "Service",
    "UploadService",
    "UploadUrlSigner",
    "UserService",
    "make_slug",
]
