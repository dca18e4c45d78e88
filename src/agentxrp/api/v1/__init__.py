"""Version 1 API endpoints."""

from .endpoints import (
    agents_router,
    posts_router,
    system_router,
    tips_router,
    votes_router,
)

__all__ = [
    "agents_router",
    "posts_router",
    "votes_router",
    "tips_router",
    "system_router",
]
