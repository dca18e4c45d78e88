"""Service-level helpers for posts and comments."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agentxrp.core.security import generate_id
from agentxrp.core.settings import settings
from agentxrp.models import Agent, Comment, Post
from agentxrp.services.agent_service import touch_last_active
from agentxrp.services.errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def _commit(db: Session, what: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as err:
        db.rollback()
        logger.exception("Could not persist %s", what)
        raise StorageError() from err


def create_post(
    db: Session,
    *,
    author: Agent,
    title: str,
    content: str = "",
    url: str = "",
) -> Post:
    """Publish a post for the author and bump their activity timestamp.

    Raises:
        ValidationError: If the title is shorter than three characters.
    """
    if not title or len(title) < 3:
        raise ValidationError("Title required (3+ chars)")

    post = Post(
        id=generate_id(),
        agent_id=author.id,
        title=title,
        content=content or "",
        url=url or "",
    )
    db.add(post)
    touch_last_active(author)
    _commit(db, f"post by {author.id}")
    db.refresh(post)
    return post


def list_posts(db: Session, *, sort: str = "new", limit: int | None = None) -> Sequence[Post]:
    """Return posts ordered by recency, raw upvotes or net score."""
    limit = min(limit or settings.posts_default_limit, settings.posts_max_limit)
    stmt = select(Post)
    if sort == "top":
        stmt = stmt.order_by(Post.upvotes.desc())
    elif sort == "hot":
        stmt = stmt.order_by((Post.upvotes - Post.downvotes).desc(), Post.created_at.desc())
    else:
        stmt = stmt.order_by(Post.created_at.desc())
    return db.scalars(stmt.limit(limit)).all()


def get_post(db: Session, post_id: str) -> Post | None:
    """Return a post by identifier."""
    return db.get(Post, post_id)


def lock_post(db: Session, post_id: str) -> Post | None:
    """Load a post holding a row lock until the transaction ends.

    Writers that recompute a post's counters take this lock first so their
    recount sees every row committed by the writer before them.
    """
    return db.scalar(
        select(Post)
        .where(Post.id == post_id)
        .with_for_update(of=Post)
        .execution_options(populate_existing=True)
    )


def list_comments(db: Session, post_id: str) -> Sequence[Comment]:
    """Return a post's comments, oldest first."""
    return db.scalars(
        select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at.asc())
    ).all()


def add_comment(
    db: Session,
    *,
    author: Agent,
    post_id: str,
    content: str,
    parent_id: str | None = None,
) -> Comment:
    """Attach a comment to an existing post.

    Raises:
        ValidationError: If the content is empty.
        NotFoundError: If the post or the parent comment does not exist.
    """
    if not content:
        raise ValidationError("Content required")
    if get_post(db, post_id) is None:
        raise NotFoundError("Post not found")
    if parent_id and db.get(Comment, parent_id) is None:
        raise NotFoundError("Parent comment not found")

    comment = Comment(
        id=generate_id(),
        post_id=post_id,
        agent_id=author.id,
        parent_id=parent_id or None,
        content=content,
    )
    db.add(comment)
    _commit(db, f"comment on {post_id}")
    return comment
