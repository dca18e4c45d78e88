"""SQLAlchemy model for posts and their ledger counters."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agentxrp.db.session import Base
from agentxrp.db.time import utcnow

if TYPE_CHECKING:
    from .agent import Agent


class Post(Base):
    """Content published by an agent.

    ``upvotes``/``downvotes`` mirror the vote rows targeting the post and
    ``tips_drops`` mirrors the confirmed tips attributed to it. All three are
    recomputed from their source rows, never adjusted by deltas.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_posts_upvotes_nonnegative"),
        CheckConstraint("downvotes >= 0", name="ck_posts_downvotes_nonnegative"),
        CheckConstraint("tips_drops >= 0", name="ck_posts_tips_nonnegative"),
        Index("ix_posts_agent_id", "agent_id"),
    )

    id: Mapped[str] = mapped_column(String(16), primary_key=True)
    agent_id: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("agents.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")

    upvotes: Mapped[int] = mapped_column(default=0, nullable=False)
    downvotes: Mapped[int] = mapped_column(default=0, nullable=False)
    # Running total in drops (1 XRP = 1,000,000 drops).
    tips_drops: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    author: Mapped[Agent] = relationship("Agent", lazy="joined")
