"""Tests for the tip recorder, including concurrent duplicate submissions."""

import pytest
from sqlalchemy import func, select

from agentxrp.models import Post, Tip
from agentxrp.services.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from agentxrp.services.tips import record_tip, sum_post_tips
from tests.concurrency import CONCURRENT_WORKERS, run_concurrently
from tests.factories import create_agent, create_post


def test_post_total_tracks_every_tip(db_session, alice, alice_post, bob, carol) -> None:
    seen = []
    for tx_hash, sender, amount in [("TX1", bob, 1_000), ("TX2", carol, 0), ("TX3", bob, 2_500)]:
        record_tip(
            db_session,
            from_agent_id=sender.id,
            to_agent_name="alice",
            amount_drops=amount,
            tx_hash=tx_hash,
            post_id=alice_post.id,
        )
        db_session.refresh(alice_post)
        seen.append(alice_post.tips_drops)

    assert seen == sorted(seen)
    assert alice_post.tips_drops == 3_500 == sum_post_tips(db_session, alice_post.id)


def test_duplicate_hash_raises_conflict(db_session, alice, alice_post, bob) -> None:
    record_tip(
        db_session,
        from_agent_id=bob.id,
        to_agent_name="alice",
        amount_drops=5_000_000,
        tx_hash="TXA",
        post_id=alice_post.id,
    )

    with pytest.raises(ConflictError):
        record_tip(
            db_session,
            from_agent_id=bob.id,
            to_agent_name="alice",
            amount_drops=5_000_000,
            tx_hash="TXA",
            post_id=alice_post.id,
        )

    db_session.refresh(alice_post)
    assert alice_post.tips_drops == 5_000_000
    assert db_session.scalar(select(func.count()).select_from(Tip)) == 1


def test_unknown_recipient_raises_not_found(db_session, bob) -> None:
    with pytest.raises(NotFoundError):
        record_tip(
            db_session,
            from_agent_id=bob.id,
            to_agent_name="ghost",
            amount_drops=1,
            tx_hash="TXG",
        )


def test_negative_amount_raises_validation_error(db_session, alice, bob) -> None:
    with pytest.raises(ValidationError):
        record_tip(
            db_session,
            from_agent_id=bob.id,
            to_agent_name="alice",
            amount_drops=-5,
            tx_hash="TXN",
        )


def test_concurrent_duplicate_submissions_insert_once(file_sessions) -> None:
    with file_sessions() as db:
        sender, _ = create_agent(db, "sender")
        create_agent(db, "receiver")
        sender_id = sender.id

    def tip_once(db, _: int) -> None:
        record_tip(
            db,
            from_agent_id=sender_id,
            to_agent_name="receiver",
            amount_drops=1_000_000,
            tx_hash="RACE",
        )

    outcomes = run_concurrently(file_sessions, range(CONCURRENT_WORKERS), tip_once)

    assert sorted(outcomes) == ["conflict"] * (CONCURRENT_WORKERS - 1) + ["ok"]
    with file_sessions() as db:
        assert db.scalar(select(func.count()).select_from(Tip)) == 1


def test_concurrent_distinct_tips_all_count_toward_post(file_sessions) -> None:
    with file_sessions() as db:
        sender, _ = create_agent(db, "sender")
        receiver, _ = create_agent(db, "receiver")
        post = create_post(db, receiver, "Tipped from every side")
        sender_id, post_id = sender.id, post.id

    amounts = [1_000 * (n + 1) for n in range(CONCURRENT_WORKERS)]

    def tip_distinct(db, n: int) -> None:
        record_tip(
            db,
            from_agent_id=sender_id,
            to_agent_name="receiver",
            amount_drops=amounts[n],
            tx_hash=f"TX{n}",
            post_id=post_id,
        )

    outcomes = run_concurrently(file_sessions, range(CONCURRENT_WORKERS), tip_distinct)

    assert outcomes == ["ok"] * CONCURRENT_WORKERS
    with file_sessions() as db:
        assert db.get(Post, post_id).tips_drops == sum(amounts)
        assert sum_post_tips(db, post_id) == sum(amounts)


def test_rejected_tip_leaves_no_open_transaction(db_session, alice, alice_post, bob) -> None:
    with pytest.raises(NotFoundError):
        record_tip(
            db_session,
            from_agent_id=bob.id,
            to_agent_name="alice",
            amount_drops=1,
            tx_hash="TXP",
            post_id="ghost123",
        )
    assert not db_session.in_transaction()

    record_tip(
        db_session,
        from_agent_id=bob.id,
        to_agent_name="alice",
        amount_drops=1,
        tx_hash="TXQ",
        post_id=alice_post.id,
    )
    with pytest.raises(ConflictError):
        record_tip(
            db_session,
            from_agent_id=bob.id,
            to_agent_name="alice",
            amount_drops=1,
            tx_hash="TXQ",
        )
    assert not db_session.in_transaction()
