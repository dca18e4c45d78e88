"""API key generation and hashing for agent credentials."""
from __future__ import annotations

import hashlib
import uuid

from agentxrp.core.settings import settings


def generate_api_key() -> str:
    """Return a fresh bearer key such as ``axrp_<32 hex chars>``."""
    return f"{settings.api_key_prefix}{uuid.uuid4().hex}"


def hash_key(api_key: str) -> str:
    """Return a SHA-256 hash of the provided api key."""
    return hashlib.sha256(api_key.encode("utf-8")).hexdigest()


def generate_id() -> str:
    """Return a short random identifier for agents, posts, comments and tips."""
    return uuid.uuid4().hex[:8]
