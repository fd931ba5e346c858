"""Response models shared by several use cases.

Referenced users are expanded to a fixed whitelist of public fields; no
credential or account-state field ever leaves through these models.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog.domain.model import Blog, User
from blog.domain.value import UserId


class AuthorSummary(BaseModel):
    """Public fields of a referenced user."""

    fullname: str
    username: str
    profile_img: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            fullname=user.fullname,
            username=user.username.root,
            profile_img=user.profile_img,
        )


class BlogActivity(BaseModel):
    """Activity counters of a blog."""

    total_likes: int
    total_comments: int
    total_reads: int
    total_parent_comments: int

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogActivity":
        return cls(
            total_likes=blog.total_likes,
            total_comments=blog.total_comments,
            total_reads=blog.total_reads,
            total_parent_comments=blog.total_parent_comments,
        )


class BlogCard(BaseModel):
    """A blog as shown in listings."""

    blog_id: str
    title: str
    des: str
    banner: str
    tags: list[str]
    draft: bool
    activity: BlogActivity
    published_at: datetime
    author: AuthorSummary | None = None

    @classmethod
    def from_blog(cls, blog: Blog, author: User | None = None) -> "BlogCard":
        return cls(
            blog_id=blog.slug.root,
            title=blog.title,
            des=blog.des,
            banner=blog.banner,
            tags=blog.tags,
            draft=blog.draft,
            activity=BlogActivity.from_blog(blog),
            published_at=blog.published_at,
            author=AuthorSummary.from_user(author) if author else None,
        )


def blog_cards(blogs: list[Blog], authors: dict[UserId, User]) -> list[BlogCard]:
    """Build listing cards, expanding each blog's author from ``authors``."""
    return [BlogCard.from_blog(blog, authors.get(blog.author_id)) for blog in blogs]


class CountResponse(BaseModel):
    """Total number of documents matching a listing's filters."""

    model_config = ConfigDict(populate_by_name=True)

    total_docs: int = Field(alias="totalDocs")
