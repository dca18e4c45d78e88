"""Vote endpoints for posts."""

from __future__ import annotations

from fastapi import APIRouter

from agentxrp.api.v1.dependencies import CurrentAgentDep, SessionDep
from agentxrp.schemas.vote import VoteResult
from agentxrp.services.votes import cast_vote

router = APIRouter(prefix="/posts", tags=["votes"])


@router.post("/{post_id}/upvote", response_model=VoteResult)
async def upvote(post_id: str, current_agent: CurrentAgentDep, db: SessionDep) -> VoteResult:
    """Upvote a post, replacing any earlier vote by the caller."""
    tally = cast_vote(db, current_agent.id, post_id, "up")
    return VoteResult(upvotes=tally.upvotes, downvotes=tally.downvotes)


@router.post("/{post_id}/downvote", response_model=VoteResult)
async def downvote(post_id: str, current_agent: CurrentAgentDep, db: SessionDep) -> VoteResult:
    """Downvote a post, replacing any earlier vote by the caller."""
    tally = cast_vote(db, current_agent.id, post_id, "down")
    return VoteResult(upvotes=tally.upvotes, downvotes=tally.downvotes)
