"""Read-only leaderboard and network statistics over the ledger."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from agentxrp.core.settings import settings
from agentxrp.models import Agent, Comment, Post, Tip
from agentxrp.services.tips import DROPS_PER_XRP

LEADERBOARD_METRICS = ("karma", "tips")


def leaderboard(db: Session, by: str = "karma", limit: int | None = None) -> list[dict[str, Any]]:
    """Return the top agents ranked by karma or by total tips received.

    Unknown metrics fall back to karma. Ties keep the store's natural order.
    """
    limit = min(limit or settings.leaderboard_limit, settings.leaderboard_limit)

    if by == "tips":
        tips_received = func.coalesce(func.sum(Tip.amount_drops), 0).label("tips_received")
        stmt = (
            select(Agent.name, Agent.xrp_address, Agent.karma, tips_received)
            .outerjoin(Tip, Tip.to_agent == Agent.id)
            .group_by(Agent.id, Agent.name, Agent.xrp_address, Agent.karma)
            .order_by(tips_received.desc())
            .limit(limit)
        )
        return [
            {
                "name": name,
                "xrp_address": address,
                "karma": int(karma),
                "tips_received": int(received or 0),
            }
            for (name, address, karma, received) in db.execute(stmt).all()
        ]

    stmt = (
        select(Agent.name, Agent.xrp_address, Agent.karma, Agent.created_at)
        .order_by(Agent.karma.desc())
        .limit(limit)
    )
    return [
        {
            "name": name,
            "xrp_address": address,
            "karma": int(karma),
            "created_at": created_at,
        }
        for (name, address, karma, created_at) in db.execute(stmt).all()
    ]


def network_stats(db: Session) -> dict[str, int]:
    """Network-wide counters with the tip volume floored to whole XRP."""
    agents = db.scalar(select(func.count()).select_from(Agent)) or 0
    posts = db.scalar(select(func.count()).select_from(Post)) or 0
    comments = db.scalar(select(func.count()).select_from(Comment)) or 0
    total_drops = db.scalar(select(func.coalesce(func.sum(Tip.amount_drops), 0))) or 0
    return {
        "agents": int(agents),
        "posts": int(posts),
        "comments": int(comments),
        "tips_xrp": int(total_drops) // DROPS_PER_XRP,
    }
