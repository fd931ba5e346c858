"""SQLAlchemy table definitions for the blog platform.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Ordered id lists (a user's blogs, a blog's comments, a comment's replies)
are stored as ``uuid[]`` columns so they can be appended to and pulled
from in a single atomic UPDATE.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("fullname", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=True),  # NULL for Google accounts
    Column("bio", String(150), nullable=False, server_default=""),
    Column("profile_img", Text, nullable=False, server_default=""),
    Column("social_links", JSONB, nullable=False, server_default="{}"),
    Column("total_posts", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column("google_auth", Boolean, nullable=False, server_default="false"),
    Column("blogs", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("slug", String(400), nullable=False, unique=True),  # public blog_id
    Column("title", Text, nullable=False),
    Column("banner", Text, nullable=False, server_default=""),
    Column("des", String(200), nullable=False, server_default=""),
    Column("content", JSONB, nullable=False, server_default="{}"),
    Column("tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("draft", Boolean, nullable=False, server_default="false"),
    Column("total_likes", Integer, nullable=False, server_default="0"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column("total_parent_comments", Integer, nullable=False, server_default="0"),
    Column("comments", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "published_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blogs_author_id", blogs_table.c.author_id)
Index("idx_blogs_published_at", blogs_table.c.published_at.desc())
Index("idx_blogs_tags", blogs_table.c.tags, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# No foreign keys to blogs/comments: the delete coordinator removes
# dependents step by step and tolerates partial failure.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("blog_id", UUID, nullable=False),
    Column("blog_author", UUID, nullable=False),
    Column("comment", Text, nullable=False),
    Column("children", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("commented_by", UUID, nullable=False),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column("parent", UUID, nullable=True),
    Column(
        "commented_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("is_reply = (parent IS NOT NULL)", name="check_reply_has_parent"),
)

Index("idx_comments_blog_id", comments_table.c.blog_id)
Index("idx_comments_parent", comments_table.c.parent)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("type", String(20), nullable=False),
    Column("blog", UUID, nullable=False),
    Column("notification_for", UUID, nullable=False),
    Column("user", UUID, nullable=False),
    Column("comment", UUID, nullable=True),
    Column("reply", UUID, nullable=True),
    Column("replied_on_comment", UUID, nullable=True),
    Column("seen", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('like', 'comment', 'reply')", name="check_notification_type"),
)

Index(
    "idx_notifications_recipient",
    notifications_table.c.notification_for,
    notifications_table.c.created_at.desc(),
)
Index("idx_notifications_blog", notifications_table.c.blog)
Index("idx_notifications_comment", notifications_table.c.comment)
Index("idx_notifications_reply", notifications_table.c.reply)
