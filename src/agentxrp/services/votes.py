"""Vote recording and post counter aggregation."""

from __future__ import annotations

import logging
from typing import Literal, NamedTuple

from sqlalchemy import case, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agentxrp.models import VOTE_TARGET_POST, Vote
from agentxrp.services.errors import StorageError
from agentxrp.services.karma import recalculate_karma
from agentxrp.services.post_service import lock_post

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]

DIRECTION_VALUES: dict[str, int] = {"up": 1, "down": -1}

# Dialects with a native INSERT ... ON CONFLICT DO UPDATE.
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class VoteTally(NamedTuple):
    """Up and down counts for one target."""

    upvotes: int
    downvotes: int


def _upsert_vote(db: Session, voter_id: str, post_id: str, value: int) -> None:
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        # The composite primary key still rejects a concurrent duplicate insert.
        db.merge(
            Vote(
                agent_id=voter_id,
                target_type=VOTE_TARGET_POST,
                target_id=post_id,
                value=value,
            )
        )
        db.flush()
        return

    stmt = insert(Vote).values(
        agent_id=voter_id,
        target_type=VOTE_TARGET_POST,
        target_id=post_id,
        value=value,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["agent_id", "target_type", "target_id"],
        set_={"value": stmt.excluded["value"]},
    )
    db.execute(stmt)


def count_votes(db: Session, post_id: str) -> VoteTally:
    """Count the +1 and -1 vote rows targeting a post."""
    up, down = db.execute(
        select(
            func.coalesce(func.sum(case((Vote.value == 1, 1), else_=0)), 0),
            func.coalesce(func.sum(case((Vote.value == -1, 1), else_=0)), 0),
        ).where(
            Vote.target_type == VOTE_TARGET_POST,
            Vote.target_id == post_id,
        )
    ).one()
    return VoteTally(int(up), int(down))


def cast_vote(db: Session, voter_id: str, post_id: str, direction: Direction) -> VoteTally:
    """Record a voter's preference on a post and refresh the derived counters.

    The vote row is upserted, so a second vote overwrites the first; there is
    no way back to "no vote". The post row is locked before the upsert and
    its counters are recounted from every vote row in the same transaction,
    so simultaneous voters never overwrite each other's tally. The author's
    karma is recalculated afterwards; if that step fails the vote stays
    recorded and karma is left stale until the next vote on any of the
    author's posts.

    Votes on an unknown post are stored without touching any post or agent.

    Args:
        db: Database session.
        voter_id: Authenticated agent casting the vote.
        post_id: Target post identifier.
        direction: ``"up"`` or ``"down"``.

    Returns:
        The freshly counted tally for the post.

    Raises:
        StorageError: If the vote could not be committed.
    """
    value = DIRECTION_VALUES[direction]
    try:
        post = lock_post(db, post_id)
        _upsert_vote(db, voter_id, post_id, value)
        tally = count_votes(db, post_id)
        author_id = None
        if post is not None:
            post.upvotes = tally.upvotes
            post.downvotes = tally.downvotes
            author_id = post.agent_id
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.exception("Vote by %s on post %s could not be recorded", voter_id, post_id)
        raise StorageError() from err

    logger.info("Agent %s voted %s on post %s", voter_id, direction, post_id)

    if author_id is not None:
        try:
            recalculate_karma(db, author_id)
        except StorageError:
            logger.warning("Vote on post %s recorded but karma for %s is stale", post_id, author_id)

    return tally
