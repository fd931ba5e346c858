"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    ChangePasswordUseCase,
    GoogleAuthUseCase,
    SigninUseCase,
    SignupUseCase,
)
from blog.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    IsLikedUseCase,
    LikeBlogUseCase,
    ListBlogsUseCase,
    UserBlogsUseCase,
)
from blog.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from blog.application.usecase.notification import NotificationsUseCase
from blog.application.usecase.upload import GetUploadUrlUseCase
from blog.application.usecase.user import GetProfileUseCase, UpdateProfileUseCase
from blog.config import PaginationSettings
from blog.domain.repository import BlogRepository, CommentRepository
from blog.domain.service import (
    AuthService,
    BlogService,
    CascadeDeleteService,
    CommentService,
    JWTService,
    LikeService,
    NotificationService,
    UploadService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_signin_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SigninUseCase:
        """Provide signin use case."""
        return SigninUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_google_auth_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> GoogleAuthUseCase:
        """Provide Google login use case."""
        return GoogleAuthUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, auth_service: AuthService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(auth_service=auth_service)

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_get_blog_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_blogs_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(
            blog_service=blog_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_blogs_use_case(
        self, blog_service: BlogService, pagination: PaginationSettings
    ) -> UserBlogsUseCase:
        """Provide the author's own blogs use case."""
        return UserBlogsUseCase(blog_service=blog_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_like_blog_use_case(self, like_service: LikeService) -> LikeBlogUseCase:
        """Provide like toggle use case."""
        return LikeBlogUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_is_liked_use_case(self, like_service: LikeService) -> IsLikedUseCase:
        """Provide like status use case."""
        return IsLikedUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_blog_use_case(
        self, cascade_service: CascadeDeleteService
    ) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(cascade_service=cascade_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide comment listing use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, cascade_service: CascadeDeleteService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(cascade_service=cascade_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_notifications_use_case(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        blog_repository: BlogRepository,
        comment_repository: CommentRepository,
        pagination: PaginationSettings,
    ) -> NotificationsUseCase:
        """Provide notifications use case."""
        return NotificationsUseCase(
            notification_service=notification_service,
            user_service=user_service,
            blog_repository=blog_repository,
            comment_repository=comment_repository,
            pagination=pagination,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Upload use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_url_use_case(
        self, upload_service: UploadService
    ) -> GetUploadUrlUseCase:
        """Provide upload URL use case."""
        return GetUploadUrlUseCase(upload_service=upload_service)
