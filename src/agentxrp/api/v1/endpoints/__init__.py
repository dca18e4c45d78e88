"""API endpoint modules for version 1."""

from .agents import router as agents_router
from .posts import router as posts_router
from .system import router as system_router
from .tips import router as tips_router
from .votes import router as votes_router

__all__ = [
    "agents_router",
    "posts_router",
    "votes_router",
    "tips_router",
    "system_router",
]
