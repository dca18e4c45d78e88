"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .agent import AgentCredentials, AgentProfile, AgentRegister, RegisterResponse
from .post import CommentCreate, CommentResponse, PostCreate, PostResponse
from .stats import LeaderboardResponse, StatsResponse
from .tip import TipCreate, TipRecorded
from .vote import VoteResult

__all__ = [
    "AgentCredentials", "AgentProfile", "AgentRegister", "RegisterResponse",
    "CommentCreate", "CommentResponse", "PostCreate", "PostResponse",
    "LeaderboardResponse", "StatsResponse",
    "TipCreate", "TipRecorded",
    "VoteResult",
]
