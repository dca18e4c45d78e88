"""Models capturing voting interactions on posts."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from agentxrp.db.session import Base

VOTE_TARGET_POST = "post"


class Vote(Base):
    """Per-agent vote on a target.

    The composite primary key allows one live vote per agent and target; a
    repeat vote overwrites ``value``. ``target_id`` is deliberately not a
    foreign key, so votes on unknown posts are still stored.
    """

    __tablename__ = "votes"
    __table_args__ = (
        CheckConstraint("value IN (1, -1)", name="ck_votes_value"),
        Index("ix_votes_target", "target_type", "target_id"),
    )

    agent_id: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("agents.id", ondelete="CASCADE"),
        primary_key=True,
    )
    target_type: Mapped[str] = mapped_column(
        String(16), primary_key=True, default=VOTE_TARGET_POST
    )
    target_id: Mapped[str] = mapped_column(String(16), primary_key=True)

    # 1 = upvote, -1 = downvote.
    value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
