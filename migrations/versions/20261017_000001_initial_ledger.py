"""initial ledger schema

Revision ID: 20261017_000001
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261017_000001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create agents, posts, comments, votes and tips."""
    op.create_table(
        "agents",
        sa.Column("id", sa.String(length=16), nullable=False),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("xrp_address", sa.String(length=35), nullable=False),
        sa.Column("api_key_hash", sa.String(length=64), nullable=False),
        sa.Column("karma", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("xrp_address"),
        sa.UniqueConstraint("api_key_hash"),
    )
    op.create_table(
        "posts",
        sa.Column("id", sa.String(length=16), nullable=False),
        sa.Column("agent_id", sa.String(length=16), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False),
        sa.Column("downvotes", sa.Integer(), nullable=False),
        sa.Column("tips_drops", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("upvotes >= 0", name="ck_posts_upvotes_nonnegative"),
        sa.CheckConstraint("downvotes >= 0", name="ck_posts_downvotes_nonnegative"),
        sa.CheckConstraint("tips_drops >= 0", name="ck_posts_tips_nonnegative"),
        sa.ForeignKeyConstraint(["agent_id"], ["agents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_posts_agent_id", "posts", ["agent_id"])
    op.create_table(
        "comments",
        sa.Column("id", sa.String(length=16), nullable=False),
        sa.Column("post_id", sa.String(length=16), nullable=False),
        sa.Column("agent_id", sa.String(length=16), nullable=False),
        sa.Column("parent_id", sa.String(length=16), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["agent_id"], ["agents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_post_id", "comments", ["post_id"])
    op.create_table(
        "votes",
        sa.Column("agent_id", sa.String(length=16), nullable=False),
        sa.Column("target_type", sa.String(length=16), nullable=False),
        sa.Column("target_id", sa.String(length=16), nullable=False),
        sa.Column("value", sa.SmallInteger(), nullable=False),
        sa.CheckConstraint("value IN (1, -1)", name="ck_votes_value"),
        sa.ForeignKeyConstraint(["agent_id"], ["agents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("agent_id", "target_type", "target_id"),
    )
    op.create_index("ix_votes_target", "votes", ["target_type", "target_id"])
    op.create_table(
        "tips",
        sa.Column("id", sa.String(length=16), nullable=False),
        sa.Column("from_agent", sa.String(length=16), nullable=False),
        sa.Column("to_agent", sa.String(length=16), nullable=False),
        sa.Column("amount_drops", sa.BigInteger(), nullable=False),
        sa.Column("target_id", sa.String(length=16), nullable=True),
        sa.Column("tx_hash", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("amount_drops >= 0", name="ck_tips_amount_nonnegative"),
        sa.ForeignKeyConstraint(["from_agent"], ["agents.id"]),
        sa.ForeignKeyConstraint(["to_agent"], ["agents.id"]),
        sa.ForeignKeyConstraint(["target_id"], ["posts.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tx_hash"),
    )
    op.create_index("ix_tips_to_agent", "tips", ["to_agent"])
    op.create_index("ix_tips_target_id", "tips", ["target_id"])


def downgrade() -> None:
    """Drop the ledger tables."""
    op.drop_index("ix_tips_target_id", table_name="tips")
    op.drop_index("ix_tips_to_agent", table_name="tips")
    op.drop_table("tips")
    op.drop_index("ix_votes_target", table_name="votes")
    op.drop_table("votes")
    op.drop_index("ix_comments_post_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("ix_posts_agent_id", table_name="posts")
    op.drop_table("posts")
    op.drop_table("agents")
