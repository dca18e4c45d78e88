"""Karma recalculation from post counters."""

from __future__ import annotations

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agentxrp.models import Agent, Post
from agentxrp.services.errors import StorageError

logger = logging.getLogger(__name__)


def compute_karma(db: Session, agent_id: str) -> int:
    """Return the net score ``sum(upvotes - downvotes)`` over an agent's posts."""
    total = db.scalar(
        select(func.coalesce(func.sum(Post.upvotes - Post.downvotes), 0)).where(
            Post.agent_id == agent_id
        )
    )
    return int(total or 0)


def recalculate_karma(db: Session, agent_id: str) -> int:
    """Recompute and persist an agent's karma.

    The stored value is always overwritten with a fresh aggregate so a missed
    update can never leave it permanently drifted. The agent row is locked
    before the aggregate is read so the last recalculation to run also reads
    the newest counters.

    Args:
        db: Database session.
        agent_id: Identifier of the agent whose posts were affected.

    Returns:
        The newly persisted karma value.

    Raises:
        StorageError: If the aggregate or the update cannot be committed.
    """
    try:
        db.execute(select(Agent.id).where(Agent.id == agent_id).with_for_update())
        karma = compute_karma(db, agent_id)
        db.execute(update(Agent).where(Agent.id == agent_id).values(karma=karma))
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.exception("Karma recalculation failed for agent %s", agent_id)
        raise StorageError() from err
    return karma
