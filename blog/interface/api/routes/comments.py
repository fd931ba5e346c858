"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CommentItem,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetBlogCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
)
from blog.domain.service import JWTService
from blog.interface.api.gate import current_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment or a reply."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")  # Internal blog id
    comment: str = ""
    blog_author: UUID | None = None
    replying_to: UUID | None = None
    notification_id: UUID | None = None


@router.post("/add-comment", response_model=AddCommentResponse)
async def add_comment(
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on a blog, or reply to a comment with ``replying_to``.

    Requires authentication.

    Args:
        request: Comment text and the blog / parent it attaches to
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The stored comment
    """
    user_id = current_user_id(authorization, jwt_service)
    return await add_comment_use_case.execute(
        AddCommentRequest(
            blog_id=str(request.id),
            user_id=user_id,
            comment=request.comment,
            blog_author=str(request.blog_author) if request.blog_author else None,
            replying_to=str(request.replying_to) if request.replying_to else None,
            notification_id=(
                str(request.notification_id) if request.notification_id else None
            ),
        )
    )


class GetBlogCommentsAPIRequest(BaseModel):
    """API request for a page of a blog's top-level comments."""

    blog_id: UUID  # Internal blog id
    skip: int = 0


@router.post("/get-blog-comments", response_model=list[CommentItem])
async def get_blog_comments(
    request: GetBlogCommentsAPIRequest,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentItem]:
    """Top-level comments of a blog, newest first."""
    return await get_comments_use_case.blog_comments(
        GetBlogCommentsRequest(blog_id=str(request.blog_id), skip=request.skip)
    )


class CommentRefAPIRequest(BaseModel):
    """API request naming one comment by ``_id``."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    skip: int = 0


@router.post("/get-replies", response_model=GetRepliesResponse)
async def get_replies(
    request: CommentRefAPIRequest,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetRepliesResponse:
    """Direct replies to a comment, newest first."""
    return await get_comments_use_case.replies(
        GetRepliesRequest(comment_id=str(request.id), skip=request.skip)
    )


@router.post("/delete-comment", response_model=DeleteCommentResponse)
async def delete_comment(
    request: CommentRefAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply under it.

    Requires authentication. Allowed for the comment's author and the
    blog's author.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(request.id), user_id=user_id)
    )
