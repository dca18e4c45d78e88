"""SQLAlchemy models for the AgentXRP ledger."""

from .agent import Agent
from .comment import Comment
from .post import Post
from .tip import TIP_STATUS_CONFIRMED, Tip
from .vote import VOTE_TARGET_POST, Vote

__all__ = [
    "Agent",
    "Comment",
    "Post",
    "Tip", "TIP_STATUS_CONFIRMED",
    "Vote", "VOTE_TARGET_POST",
]
