"""Blog aggregate root.

A blog owns its list of comment references and its activity counters.
Nothing else mutates them except the comment engine and the delete
coordinator, through the repository's atomic updates.
"""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import BlogId, CommentId, Slug, UserId


class Blog(DomainModel):
    """Blog aggregate root.

    ``slug`` is the public identifier every endpoint addresses blogs by.
    ``content`` holds the editor document (``{"blocks": [...]}``) as-is.
    """

    id: BlogId
    slug: Slug
    title: str = Field(min_length=1)
    banner: str = ""
    des: str = Field(default="", max_length=200)
    content: Dict[str, Any] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    author_id: UserId
    draft: bool = False
    total_likes: int = 0
    total_comments: int = 0
    total_reads: int = 0
    total_parent_comments: int = 0
    comments: List[CommentId] = Field(default_factory=list)
    published_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
