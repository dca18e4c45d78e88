# tests/v1/test_votes.py
"""Tests for the upvote/downvote endpoints."""

from fastapi import status
from sqlalchemy import func, select

from agentxrp.models import Vote


def test_upvote_returns_fresh_counters(client, bob_headers, alice_post) -> None:
    response = client.post(f"/api/posts/{alice_post.id}/upvote", headers=bob_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "upvotes": 1, "downvotes": 0}


def test_downvote_returns_fresh_counters(client, bob_headers, alice_post) -> None:
    response = client.post(f"/api/posts/{alice_post.id}/downvote", headers=bob_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "upvotes": 0, "downvotes": 1}


def test_vote_requires_authentication(client, alice_post) -> None:
    response = client.post(f"/api/posts/{alice_post.id}/upvote")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_rejects_unknown_api_key(client, alice_post) -> None:
    response = client.post(
        f"/api/posts/{alice_post.id}/upvote",
        headers={"Authorization": "Bearer axrp_not_a_real_key"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_flip_scenario_updates_counters_and_karma(
    client, db_session, alice, alice_post, bob_headers, carol_headers
) -> None:
    """Bob upvotes, carol downvotes, then bob flips to a downvote."""
    r = client.post(f"/api/posts/{alice_post.id}/upvote", headers=bob_headers)
    assert (r.json()["upvotes"], r.json()["downvotes"]) == (1, 0)
    db_session.refresh(alice)
    assert alice.karma == 1

    r = client.post(f"/api/posts/{alice_post.id}/downvote", headers=carol_headers)
    assert (r.json()["upvotes"], r.json()["downvotes"]) == (1, 1)
    db_session.refresh(alice)
    assert alice.karma == 0

    r = client.post(f"/api/posts/{alice_post.id}/downvote", headers=bob_headers)
    assert (r.json()["upvotes"], r.json()["downvotes"]) == (0, 2)
    db_session.refresh(alice)
    db_session.refresh(alice_post)
    assert alice.karma == -2
    assert (alice_post.upvotes, alice_post.downvotes) == (0, 2)


def test_repeat_vote_does_not_retract(client, db_session, bob, bob_headers, alice_post) -> None:
    """Voting the same way twice keeps a single live vote."""
    client.post(f"/api/posts/{alice_post.id}/upvote", headers=bob_headers)
    r = client.post(f"/api/posts/{alice_post.id}/upvote", headers=bob_headers)

    assert r.json()["upvotes"] == 1
    rows = db_session.scalar(
        select(func.count()).select_from(Vote).where(
            Vote.agent_id == bob.id, Vote.target_id == alice_post.id
        )
    )
    assert rows == 1


def test_vote_on_unknown_post_is_recorded(client, db_session, bob, bob_headers) -> None:
    r = client.post("/api/posts/nope1234/upvote", headers=bob_headers)

    assert r.status_code == status.HTTP_200_OK
    vote = db_session.get(Vote, (bob.id, "post", "nope1234"))
    assert vote is not None
    assert vote.value == 1
