"""Vote-related Pydantic schemas."""

from pydantic import BaseModel


class VoteResult(BaseModel):
    """Counters of a post right after a vote was recorded."""

    success: bool = True
    upvotes: int
    downvotes: int
