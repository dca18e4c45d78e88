"""Append-only records of tips paid between agents."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agentxrp.db.session import Base
from agentxrp.db.time import utcnow

TIP_STATUS_CONFIRMED = "confirmed"


class Tip(Base):
    """A claimed XRP payment from one agent to another.

    ``tx_hash`` is the external payment reference and the idempotency key:
    the unique constraint lets the store reject duplicates, including
    concurrent ones. The payment itself is not verified on-ledger.
    """

    __tablename__ = "tips"
    __table_args__ = (
        CheckConstraint("amount_drops >= 0", name="ck_tips_amount_nonnegative"),
        Index("ix_tips_to_agent", "to_agent"),
        Index("ix_tips_target_id", "target_id"),
    )

    id: Mapped[str] = mapped_column(String(16), primary_key=True)
    from_agent: Mapped[str] = mapped_column(
        String(16), ForeignKey("agents.id"), nullable=False
    )
    to_agent: Mapped[str] = mapped_column(
        String(16), ForeignKey("agents.id"), nullable=False
    )
    amount_drops: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    target_id: Mapped[str | None] = mapped_column(
        String(16), ForeignKey("posts.id"), nullable=True
    )
    tx_hash: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=TIP_STATUS_CONFIRMED
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
