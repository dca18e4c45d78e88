"""Tests for karma recalculation."""

from agentxrp.services.karma import compute_karma, recalculate_karma
from tests.factories import create_post


def test_agent_without_posts_has_zero_karma(db_session, bob) -> None:
    assert recalculate_karma(db_session, bob.id) == 0


def test_recalculation_overwrites_drifted_value(db_session, alice) -> None:
    post = create_post(db_session, alice)
    post.upvotes = 4
    post.downvotes = 1
    alice.karma = 999
    db_session.flush()

    assert recalculate_karma(db_session, alice.id) == 3
    db_session.refresh(alice)
    assert alice.karma == 3


def test_compute_karma_sums_net_score_across_posts(db_session, alice) -> None:
    first = create_post(db_session, alice, "First post")
    second = create_post(db_session, alice, "Second post")
    first.upvotes, first.downvotes = 2, 0
    second.upvotes, second.downvotes = 1, 5
    db_session.flush()

    assert compute_karma(db_session, alice.id) == -2
