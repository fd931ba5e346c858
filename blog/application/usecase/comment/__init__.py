"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentItem,
    GetBlogCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "CommentItem",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetBlogCommentsRequest",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
]
