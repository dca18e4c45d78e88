"""Leaderboard and network statistics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from agentxrp.api.v1.dependencies import SessionDep
from agentxrp.schemas.stats import LeaderboardResponse, StatsResponse
from agentxrp.services import stats

router = APIRouter(tags=["system", "transparency"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    db: SessionDep,
    by: str = Query("karma", description="karma or tips"),
) -> LeaderboardResponse:
    """Return up to 50 agents ranked by karma or by tips received."""
    return LeaderboardResponse(leaderboard=stats.leaderboard(db, by=by))


@router.get("/stats", response_model=StatsResponse)
async def get_stats(db: SessionDep) -> StatsResponse:
    """Network-wide activity counters."""
    return StatsResponse(**stats.network_stats(db))
