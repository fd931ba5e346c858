"""Blog routes: publishing, reading, listings, likes and deletion."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.blog import (
    CreateBlogRequest,
    CreateBlogResponse,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogResponse,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    IsLikedRequest,
    IsLikedResponse,
    IsLikedUseCase,
    LatestBlogsRequest,
    LikeBlogRequest,
    LikeBlogResponse,
    LikeBlogUseCase,
    ListBlogsResponse,
    ListBlogsUseCase,
    SearchBlogsRequest,
    UserBlogsRequest,
    UserBlogsResponse,
    UserBlogsUseCase,
)
from blog.application.usecase.common import CountResponse
from blog.domain.service import JWTService
from blog.interface.api.gate import current_user_id

router = APIRouter(tags=["blogs"], route_class=DishkaRoute)


# ============================================================================
# Publishing
# ============================================================================


class CreateBlogAPIRequest(BaseModel):
    """API request for publishing, saving a draft or editing a blog."""

    title: str = ""
    banner: str = ""
    des: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    draft: bool = False
    id: str | None = None  # Public blog id of the blog being edited


@router.post("/create-blog", response_model=CreateBlogResponse)
async def create_blog(
    request: CreateBlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateBlogResponse:
    """Publish a new blog, save a draft, or edit one of the caller's blogs.

    Requires authentication.

    Args:
        request: Blog fields, plus ``id`` when editing
        create_blog_use_case: Create blog use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The public blog id
    """
    user_id = current_user_id(authorization, jwt_service)
    return await create_blog_use_case.execute(
        CreateBlogRequest(author_id=user_id, **request.model_dump())
    )


@router.post("/get-blog", response_model=GetBlogResponse)
async def get_blog(
    request: GetBlogRequest,
    get_blog_use_case: FromDishka[GetBlogUseCase],
) -> GetBlogResponse:
    """Read one blog by its public id."""
    return await get_blog_use_case.execute(request)


# ============================================================================
# Public listings
# ============================================================================


@router.post("/latest-blogs", response_model=ListBlogsResponse)
async def latest_blogs(
    request: LatestBlogsRequest,
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
) -> ListBlogsResponse:
    """Newest published blogs, one page at a time."""
    return await list_blogs_use_case.latest(request)


@router.get("/trending-blogs", response_model=ListBlogsResponse)
async def trending_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
) -> ListBlogsResponse:
    """Most read, then most liked, published blogs."""
    return await list_blogs_use_case.trending()


@router.post("/all-latest-blogs-count", response_model=CountResponse)
async def all_latest_blogs_count(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
) -> CountResponse:
    return await list_blogs_use_case.count_latest()


@router.post("/search-blogs", response_model=ListBlogsResponse)
async def search_blogs(
    request: SearchBlogsRequest,
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
) -> ListBlogsResponse:
    """Published blogs by tag, title match or author."""
    return await list_blogs_use_case.search(request)


@router.post("/search-blogs-count", response_model=CountResponse)
async def search_blogs_count(
    request: SearchBlogsRequest,
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
) -> CountResponse:
    return await list_blogs_use_case.count_search(request)


# ============================================================================
# Author dashboard
# ============================================================================


class UserBlogsAPIRequest(BaseModel):
    """API request for the caller's own blogs."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = 1
    draft: bool = False
    query: str = ""
    deleted_doc_count: int = Field(default=0, alias="deletedDocCount")


@router.post("/user-written-blogs", response_model=UserBlogsResponse)
async def user_written_blogs(
    request: UserBlogsAPIRequest,
    user_blogs_use_case: FromDishka[UserBlogsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserBlogsResponse:
    """The caller's published blogs or drafts.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await user_blogs_use_case.execute(
        UserBlogsRequest(
            user_id=user_id,
            page=request.page,
            draft=request.draft,
            query=request.query,
            deleted_doc_count=request.deleted_doc_count,
        )
    )


@router.post("/user-written-blogs-count", response_model=CountResponse)
async def user_written_blogs_count(
    request: UserBlogsAPIRequest,
    user_blogs_use_case: FromDishka[UserBlogsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CountResponse:
    user_id = current_user_id(authorization, jwt_service)
    return await user_blogs_use_case.count(
        UserBlogsRequest(user_id=user_id, draft=request.draft, query=request.query)
    )


# ============================================================================
# Likes
# ============================================================================


class LikeBlogAPIRequest(BaseModel):
    """API request for the like toggle."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    is_liked_by_user: bool = Field(alias="isLikedByUser")


@router.post("/like-blog", response_model=LikeBlogResponse)
async def like_blog(
    request: LikeBlogAPIRequest,
    like_blog_use_case: FromDishka[LikeBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> LikeBlogResponse:
    """Like or unlike a blog.

    Requires authentication. ``isLikedByUser`` is the state the client
    currently shows; the response carries the new state.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await like_blog_use_case.execute(
        LikeBlogRequest(
            blog_id=str(request.id),
            user_id=user_id,
            currently_liked=request.is_liked_by_user,
        )
    )


class IsLikedAPIRequest(BaseModel):
    """API request for the caller's like state on a blog."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")


@router.post("/isliked-by-user", response_model=IsLikedResponse)
async def is_liked_by_user(
    request: IsLikedAPIRequest,
    is_liked_use_case: FromDishka[IsLikedUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> IsLikedResponse:
    user_id = current_user_id(authorization, jwt_service)
    return await is_liked_use_case.execute(
        IsLikedRequest(blog_id=str(request.id), user_id=user_id)
    )


# ============================================================================
# Deletion
# ============================================================================


class DeleteBlogAPIRequest(BaseModel):
    """API request for deleting a blog by its public id."""

    blog_id: str


@router.post("/delete-blog", response_model=DeleteBlogResponse)
async def delete_blog(
    request: DeleteBlogAPIRequest,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteBlogResponse:
    """Delete one of the caller's blogs with its comments and notifications.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await delete_blog_use_case.execute(
        DeleteBlogRequest(blog_id=request.blog_id, user_id=user_id)
    )
