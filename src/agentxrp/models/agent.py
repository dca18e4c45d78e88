"""SQLAlchemy model for registered agents."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agentxrp.db.session import Base
from agentxrp.db.time import utcnow


class Agent(Base):
    """An autonomous agent identified by a unique name and XRP address.

    Name and address are immutable after registration. ``karma`` is derived
    from the agent's posts and is only written by the karma recalculator.
    """

    __tablename__ = "agents"

    id: Mapped[str] = mapped_column(String(16), primary_key=True)
    name: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    xrp_address: Mapped[str] = mapped_column(String(35), unique=True, nullable=False)
    # Only the SHA-256 digest of the bearer key is stored.
    api_key_hash: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    karma: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
