"""Initial schema - users, posts, likes, comments, followers, hashtags.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def _user_fk(name: str = "user_id") -> sa.Column:
    return sa.Column(
        name, sa.BigInteger,
        sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.Text, nullable=False, unique=True),
        sa.Column("email", sa.Text, nullable=False, unique=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        _created_at(),
    )

    op.create_table(
        "posts",
        _id(),
        _user_fk(),
        sa.Column("content", sa.Text, nullable=False),
        _created_at(),
    )

    op.create_table(
        "likes",
        _id(),
        _user_fk(),
        sa.Column(
            "post_id", sa.BigInteger,
            sa.ForeignKey("posts.id", ondelete="RESTRICT"), nullable=False,
        ),
        _created_at(),
        sa.UniqueConstraint("user_id", "post_id", name="likes_user_id_post_id_key"),
    )

    op.create_table(
        "comments",
        _id(),
        _user_fk(),
        sa.Column(
            "post_id", sa.BigInteger,
            sa.ForeignKey("posts.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("content", sa.Text, nullable=False),
        _created_at(),
    )

    op.create_table(
        "followers",
        _id(),
        _user_fk("follower_id"),
        _user_fk("followee_id"),
        _created_at(),
        sa.UniqueConstraint(
            "follower_id", "followee_id",
            name="followers_follower_id_followee_id_key",
        ),
    )

    op.create_table(
        "hashtags",
        _id(),
        sa.Column("name", sa.Text, nullable=False, unique=True),
    )

    # Foreign-key lookups
    op.create_index("ix_posts_user_id", "posts", ["user_id"])
    op.create_index("ix_likes_post_id", "likes", ["post_id"])
    op.create_index("ix_comments_user_id", "comments", ["user_id"])
    op.create_index("ix_comments_post_id", "comments", ["post_id"])
    op.create_index("ix_followers_followee_id", "followers", ["followee_id"])


def downgrade() -> None:
    op.drop_index("ix_followers_followee_id", table_name="followers")
    op.drop_index("ix_comments_post_id", table_name="comments")
    op.drop_index("ix_comments_user_id", table_name="comments")
    op.drop_index("ix_likes_post_id", table_name="likes")
    op.drop_index("ix_posts_user_id", table_name="posts")
    op.drop_table("hashtags")
    op.drop_table("followers")
    op.drop_table("comments")
    op.drop_table("likes")
    op.drop_table("posts")
    op.drop_table("users")
