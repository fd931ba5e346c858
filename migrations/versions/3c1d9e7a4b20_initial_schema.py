"""initial_schema

Create the schema for the blog platform:
- Users (password and Google accounts)
- Blogs (published and drafts, activity counters)
- Comments (threaded replies via parent / children)
- Notifications (like, comment and reply events)

Revision ID: 3c1d9e7a4b20
Revises:
Create Date: 2026-10-18 10:12:44.301592

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d9e7a4b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("fullname", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(150), nullable=False, server_default=""),
        sa.Column("profile_img", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "social_links",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("total_posts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("google_auth", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "blogs",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        _timestamp("joined_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # BLOGS table
    # ========================================================================
    op.create_table(
        "blogs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(400), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("banner", sa.Text(), nullable=False, server_default=""),
        sa.Column("des", sa.String(200), nullable=False, server_default=""),
        sa.Column(
            "content",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("draft", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("total_likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "total_parent_comments", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "comments",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        _timestamp("published_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_blogs_slug"),
    )
    op.create_index("idx_blogs_author_id", "blogs", ["author_id"])
    op.create_index(
        "idx_blogs_published_at", "blogs", [sa.text("published_at DESC")]
    )
    op.create_index("idx_blogs_tags", "blogs", ["tags"], postgresql_using="gin")

    # ========================================================================
    # COMMENTS table (no FKs: dependents are removed step by step)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("blog_author", sa.UUID(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column(
            "children",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("commented_by", sa.UUID(), nullable=False),
        sa.Column("is_reply", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("parent", sa.UUID(), nullable=True),
        _timestamp("commented_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "is_reply = (parent IS NOT NULL)", name="check_reply_has_parent"
        ),
    )
    op.create_index("idx_comments_blog_id", "comments", ["blog_id"])
    op.create_index("idx_comments_parent", "comments", ["parent"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("blog", sa.UUID(), nullable=False),
        sa.Column("notification_for", sa.UUID(), nullable=False),
        sa.Column("user", sa.UUID(), nullable=False),
        sa.Column("comment", sa.UUID(), nullable=True),
        sa.Column("reply", sa.UUID(), nullable=True),
        sa.Column("replied_on_comment", sa.UUID(), nullable=True),
        sa.Column("seen", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('like', 'comment', 'reply')", name="check_notification_type"
        ),
    )
    op.create_index(
        "idx_notifications_recipient",
        "notifications",
        ["notification_for", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_blog", "notifications", ["blog"])
    op.create_index("idx_notifications_comment", "notifications", ["comment"])
    op.create_index("idx_notifications_reply", "notifications", ["reply"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("blogs")
    op.drop_table("users")
