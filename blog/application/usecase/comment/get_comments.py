"""Get comments and replies use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.common import AuthorSummary
from blog.config import PaginationSettings
from blog.domain.model import Comment, User
from blog.domain.service import CommentService, UserService
from blog.domain.value import BlogId, CommentId, UserId


class CommentItem(BaseModel):
    """Comment item in response, with its author expanded."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    blog_id: str
    comment: str
    children: list[str]
    commented_by: AuthorSummary | None
    commented_by_id: str
    is_reply: bool = Field(alias="isReply")
    parent: str | None
    commented_at: datetime = Field(alias="commentedAt")

    @classmethod
    def from_comment(cls, comment: Comment, author: User | None) -> "CommentItem":
        return cls(
            id=str(comment.id),
            blog_id=str(comment.blog_id),
            comment=comment.comment,
            children=[str(child) for child in comment.children],
            commented_by=AuthorSummary.from_user(author) if author else None,
            commented_by_id=str(comment.commented_by),
            is_reply=comment.is_reply,
            parent=str(comment.parent) if comment.parent else None,
            commented_at=comment.commented_at,
        )


class GetBlogCommentsRequest(BaseModel):
    """Get blog comments request."""

    blog_id: str  # Internal blog id
    skip: int = 0


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str
    skip: int = 0


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    replies: list[CommentItem]


class GetCommentsUseCase:
    """Use case for paging through a blog's comment threads."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service, for author summaries
            pagination: Page sizes
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.pagination = pagination

    async def _with_authors(self, comments: list[Comment]) -> list[CommentItem]:
        authors: dict[UserId, User] = await self.user_service.get_many(
            [comment.commented_by for comment in comments]
        )
        return [
            CommentItem.from_comment(comment, authors.get(comment.commented_by))
            for comment in comments
        ]

    async def blog_comments(self, request: GetBlogCommentsRequest) -> list[CommentItem]:
        """Top-level comments of a blog, newest first."""
        comments = await self.comment_service.get_blog_comments(
            BlogId(UUID(request.blog_id)),
            skip=request.skip,
            limit=self.pagination.comments,
        )
        return await self._with_authors(comments)

    async def replies(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Direct replies to a comment, newest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comments = await self.comment_service.get_replies(
            CommentId(UUID(request.comment_id)),
            skip=request.skip,
            limit=self.pagination.replies,
        )
        return GetRepliesResponse(replies=await self._with_authors(comments))
