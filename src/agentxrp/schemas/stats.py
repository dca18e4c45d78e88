"""Leaderboard and statistics schemas."""

from typing import Any

from pydantic import BaseModel


class LeaderboardResponse(BaseModel):
    """Top agents by the requested metric."""

    leaderboard: list[dict[str, Any]]


class StatsResponse(BaseModel):
    """Network-wide counters; tip volume is floored to whole XRP."""

    agents: int
    posts: int
    comments: int
    tips_xrp: int
