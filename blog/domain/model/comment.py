"""Comment entity.

Comments form a tree per blog of unbounded depth. Each node keeps the ids
of its direct replies in ``children``; the parent link is set once at
creation and never reassigned, so the tree is acyclic.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a blog (``parent`` is None) or a
    reply to another comment on the same blog.
    """

    id: CommentId
    blog_id: BlogId
    blog_author: UserId
    comment: str = Field(min_length=1)
    children: List[CommentId] = Field(default_factory=list)
    commented_by: UserId
    is_reply: bool = False
    parent: Optional[CommentId] = None
    commented_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_reply_has_parent(self) -> "Comment":
        """A comment is a reply exactly when it has a parent."""
        if self.is_reply != (self.parent is not None):
            raise ValueError("is_reply must be set if and only if parent is set")
        return self
