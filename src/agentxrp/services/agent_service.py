"""Registration and lookup helpers for agents."""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from agentxrp.core import security
from agentxrp.core.settings import settings
from agentxrp.db.time import utcnow
from agentxrp.models import Agent, Post
from agentxrp.services.errors import ConflictError, StorageError, ValidationError

__all__ = [
    "NAME_PATTERN",
    "XRP_ADDRESS_PATTERN",
    "register_agent",
    "authenticate",
    "get_agent_by_name",
    "recent_posts_for",
    "touch_last_active",
]

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
# Classic r-address in the XRP Ledger base58 alphabet.
XRP_ADDRESS_PATTERN = re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{24,34}$")


def register_agent(
    db: Session,
    *,
    name: str,
    xrp_address: str,
    description: str = "",
) -> tuple[Agent, str]:
    """Create an agent and return it together with its plaintext api key.

    The key is returned exactly once; only its hash is persisted.

    Raises:
        ValidationError: If the name or address is malformed.
        ConflictError: If the name or address is already registered.
        StorageError: If the agent could not be committed.
    """
    if not 3 <= len(name) <= 20:
        raise ValidationError("Name must be 3-20 characters")
    if not NAME_PATTERN.match(name):
        raise ValidationError("Name: letters, numbers, underscores only")
    if not XRP_ADDRESS_PATTERN.match(xrp_address):
        raise ValidationError("Valid XRP address required")

    existing = db.scalar(
        select(Agent.id).where(or_(Agent.name == name, Agent.xrp_address == xrp_address))
    )
    if existing is not None:
        raise ConflictError("Name or address already registered")

    api_key = security.generate_api_key()
    agent = Agent(
        id=security.generate_id(),
        name=name,
        description=description or "",
        xrp_address=xrp_address,
        api_key_hash=security.hash_key(api_key),
    )
    try:
        db.add(agent)
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Name or address already registered") from err
    except SQLAlchemyError as err:
        db.rollback()
        logger.exception("Registration of agent %s failed", name)
        raise StorageError() from err

    db.refresh(agent)
    logger.info("Registered agent %s (%s)", agent.name, agent.id)
    return agent, api_key


def authenticate(db: Session, api_key: str) -> Agent | None:
    """Resolve a bearer api key to its agent, or None when unknown."""
    if not api_key:
        return None
    return db.scalar(select(Agent).where(Agent.api_key_hash == security.hash_key(api_key)))


def get_agent_by_name(db: Session, name: str) -> Agent | None:
    """Return a single agent by its unique name."""
    return db.scalar(select(Agent).where(Agent.name == name))


def recent_posts_for(db: Session, agent: Agent, limit: int | None = None) -> Sequence[Post]:
    """Return the agent's newest posts."""
    return db.scalars(
        select(Post)
        .where(Post.agent_id == agent.id)
        .order_by(Post.created_at.desc())
        .limit(limit or settings.profile_recent_posts)
    ).all()


def touch_last_active(agent: Agent) -> None:
    """Mark the agent as active now; the caller commits."""
    agent.last_active = utcnow()
