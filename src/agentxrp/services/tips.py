"""Recording of off-chain-verified tips between agents."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from agentxrp.core.security import generate_id
from agentxrp.models import TIP_STATUS_CONFIRMED, Agent, Tip
from agentxrp.services.errors import ConflictError, NotFoundError, StorageError, ValidationError
from agentxrp.services.post_service import lock_post

logger = logging.getLogger(__name__)

DROPS_PER_XRP = 1_000_000


def sum_post_tips(db: Session, post_id: str) -> int:
    """Return the total drops of confirmed tips attributed to a post."""
    total = db.scalar(
        select(func.coalesce(func.sum(Tip.amount_drops), 0)).where(
            Tip.target_id == post_id,
            Tip.status == TIP_STATUS_CONFIRMED,
        )
    )
    return int(total or 0)


def _insert_tip(db: Session, tip: Tip) -> None:
    # The SAVEPOINT confines a duplicate-key failure to the tip insert.
    try:
        with db.begin_nested():
            db.add(tip)
    except IntegrityError as err:
        logger.warning("Rejected duplicate tip submission for tx %s", tip.tx_hash)
        raise ConflictError("Transaction already recorded") from err


def record_tip(
    db: Session,
    *,
    from_agent_id: str,
    to_agent_name: str,
    amount_drops: int,
    tx_hash: str,
    post_id: str | None = None,
) -> Tip:
    """Record a claimed payment and credit it to a post when one is given.

    The payment is trusted as reported; only ``tx_hash`` uniqueness is
    enforced, and it is enforced by the store's unique key rather than by a
    prior lookup, so concurrent submissions of one hash yield exactly one
    row. The target post is locked before the tip is inserted so concurrent
    tips on one post recompute its total one after another.

    Args:
        db: Database session.
        from_agent_id: Authenticated agent that sent the payment.
        to_agent_name: Name of the receiving agent.
        amount_drops: Payment amount in drops.
        tx_hash: External payment reference.
        post_id: Optional post the tip is attributed to.

    Returns:
        The persisted tip.

    Raises:
        ValidationError: If the amount is negative or the hash is empty.
        NotFoundError: If the recipient or the post does not exist.
        ConflictError: If ``tx_hash`` has already been recorded.
        StorageError: If the transaction could not be committed.
    """
    if not tx_hash or not to_agent_name:
        raise ValidationError("tx_hash and to_agent required")
    if amount_drops < 0:
        raise ValidationError("amount_drops must be non-negative")

    try:
        recipient_id = db.scalar(select(Agent.id).where(Agent.name == to_agent_name))
        if recipient_id is None:
            raise NotFoundError("Recipient not found")

        post = None
        if post_id:
            post = lock_post(db, post_id)
            if post is None:
                raise NotFoundError("Post not found")

        tip = Tip(
            id=generate_id(),
            from_agent=from_agent_id,
            to_agent=recipient_id,
            amount_drops=amount_drops,
            target_id=post_id or None,
            tx_hash=tx_hash,
            status=TIP_STATUS_CONFIRMED,
        )
        _insert_tip(db, tip)

        if post is not None:
            post.tips_drops = sum_post_tips(db, post.id)
        db.commit()
    except (NotFoundError, ConflictError):
        db.rollback()
        raise
    except IntegrityError as err:
        # A concurrent writer committed the same hash between our flush and commit.
        db.rollback()
        raise ConflictError("Transaction already recorded") from err
    except SQLAlchemyError as err:
        db.rollback()
        logger.exception("Tip %s could not be recorded", tx_hash)
        raise StorageError() from err

    logger.info(
        "Recorded tip %s: %s -> %s, %d drops", tx_hash, from_agent_id, recipient_id, amount_drops
    )
    return tip
