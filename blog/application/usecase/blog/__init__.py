"""Blog use cases."""

from .create_blog import CreateBlogRequest, CreateBlogResponse, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogResponse, DeleteBlogUseCase
from .get_blog import BlogDetail, GetBlogRequest, GetBlogResponse, GetBlogUseCase
from .like_blog import (
    IsLikedRequest,
    IsLikedResponse,
    IsLikedUseCase,
    LikeBlogRequest,
    LikeBlogResponse,
    LikeBlogUseCase,
)
from .list_blogs import (
    LatestBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    SearchBlogsRequest,
)
from .user_blogs import UserBlogsRequest, UserBlogsResponse, UserBlogsUseCase

__all__ = [
    "BlogDetail",
    "CreateBlogRequest",
    "CreateBlogResponse",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogResponse",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "IsLikedRequest",
    "IsLikedResponse",
    "IsLikedUseCase",
    "LatestBlogsRequest",
    "LikeBlogRequest",
    "LikeBlogResponse",
    "LikeBlogUseCase",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "SearchBlogsRequest",
    "UserBlogsRequest",
    "UserBlogsResponse",
    "UserBlogsUseCase",
]
