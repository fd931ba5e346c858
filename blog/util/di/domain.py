"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from blog.domain.service import (
    AuthService,
    BlogService,
    CascadeDeleteService,
    CommentService,
    FederatedIdentityVerifier,
    JWTService,
    LikeService,
    NotificationService,
    UploadService,
    UploadUrlSigner,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        identity_verifier: FederatedIdentityVerifier,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository, identity_verifier=identity_verifier
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_blog_service(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
        notification_repository: NotificationRepository,
    ) -> BlogService:
        """Provide blog domain service."""
        return BlogService(
            blog_repository=blog_repository,
            user_repository=user_repository,
            comment_repository=comment_repository,
            notification_repository=notification_repository,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            blog_repository=blog_repository,
            notification_service=notification_service,
        )

    @provide
    def get_like_service(
        self,
        blog_repository: BlogRepository,
        notification_repository: NotificationRepository,
        notification_service: NotificationService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            blog_repository=blog_repository,
            notification_repository=notification_repository,
            notification_service=notification_service,
        )

    @provide
    def get_cascade_service(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
        notification_repository: NotificationRepository,
    ) -> CascadeDeleteService:
        """Provide cascading delete coordinator."""
        return CascadeDeleteService(
            comment_repository=comment_repository,
            blog_repository=blog_repository,
            user_repository=user_repository,
            notification_repository=notification_repository,
        )

    @provide
    def get_upload_service(self, signer: UploadUrlSigner) -> UploadService:
        """Provide upload domain service."""
        return UploadService(signer=signer)
