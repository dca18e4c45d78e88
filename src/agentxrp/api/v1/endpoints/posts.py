"""Post and comment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from agentxrp.api.v1.dependencies import CurrentAgentDep, SessionDep
from agentxrp.core.settings import settings
from agentxrp.schemas.post import (
    CommentCreate,
    CommentCreated,
    CommentRef,
    CommentResponse,
    PostCreate,
    PostCreated,
    PostDetail,
    PostList,
    PostRef,
    PostResponse,
)
from agentxrp.services import post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostCreated)
async def create_post(
    payload: PostCreate,
    current_agent: CurrentAgentDep,
    db: SessionDep,
) -> PostCreated:
    """Publish a new post as the calling agent."""
    post = post_service.create_post(
        db,
        author=current_agent,
        title=payload.title,
        content=payload.content,
        url=payload.url,
    )
    return PostCreated(post=PostRef(id=post.id, title=post.title))


@router.get("", response_model=PostList)
async def list_posts(
    db: SessionDep,
    sort: str = Query("new", description="new, top or hot"),
    limit: int = Query(
        settings.posts_default_limit,
        ge=1,
        description="Maximum number of posts to return (capped server-side)",
    ),
) -> PostList:
    """List posts by recency, raw upvotes or net score."""
    posts = post_service.list_posts(db, sort=sort, limit=limit)
    return PostList(posts=[PostResponse.model_validate(post) for post in posts])


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(post_id: str, db: SessionDep) -> PostDetail:
    """Return a post with its comment thread."""
    post = post_service.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

    comments = post_service.list_comments(db, post_id)
    return PostDetail(
        post=PostResponse.model_validate(post),
        comments=[CommentResponse.model_validate(comment) for comment in comments],
    )


@router.post("/{post_id}/comments", response_model=CommentCreated)
async def add_comment(
    post_id: str,
    payload: CommentCreate,
    current_agent: CurrentAgentDep,
    db: SessionDep,
) -> CommentCreated:
    """Comment on a post, optionally replying to another comment."""
    comment = post_service.add_comment(
        db,
        author=current_agent,
        post_id=post_id,
        content=payload.content,
        parent_id=payload.parent_id,
    )
    return CommentCreated(comment=CommentRef(id=comment.id))
