"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentService
from blog.domain.value import BlogId, CommentId, NotificationId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    blog_id: str  # Internal blog id
    user_id: str  # From authenticated user
    comment: str
    blog_author: str | None = None
    replying_to: str | None = None  # Parent comment id for replies
    notification_id: str | None = None


class AddCommentResponse(BaseModel):
    """Add comment response."""

    model_config = ConfigDict(populate_by_name=True)

    comment: str
    commented_at: datetime = Field(alias="commentedAt")
    id: str = Field(alias="_id")
    user_id: str
    children: list[str]


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a blog or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            EmptyCommentError: If the comment is blank
            NotFoundError: If the blog or parent comment does not exist
            ValidationError: If the parent belongs to another blog
        """
        comment = await self.comment_service.add_comment(
            blog_id=BlogId(UUID(request.blog_id)),
            blog_author=UserId(UUID(request.blog_author)) if request.blog_author else None,
            commenting_user=UserId(UUID(request.user_id)),
            text=request.comment,
            parent_id=CommentId(UUID(request.replying_to)) if request.replying_to else None,
            notification_id=(
                NotificationId(UUID(request.notification_id))
                if request.notification_id
                else None
            ),
        )

        return AddCommentResponse(
            comment=comment.comment,
            commented_at=comment.commented_at,
            id=str(comment.id),
            user_id=str(comment.commented_by),
            children=[str(child) for child in comment.children],
        )
