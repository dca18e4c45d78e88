"""Post and comment Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _flatten_author(cls: type[BaseModel], data: object) -> object:
    if not isinstance(data, dict):
        extracted: dict[str, object | None] = {}
        for field_name in cls.model_fields:
            extracted[field_name] = getattr(data, field_name, None)
        author = getattr(data, "author", None)
        if author is not None:
            extracted["author_name"] = author.name
            if "author_address" in cls.model_fields:
                extracted["author_address"] = author.xrp_address
        data = extracted
    return data


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., description="Post title, at least three characters")
    content: str = Field("", max_length=10000)
    url: str = Field("", max_length=2000)


class PostRef(BaseModel):
    """Identifiers returned after a post is created."""

    id: str
    title: str


class PostCreated(BaseModel):
    """Response body for a successful post creation."""

    success: bool = True
    post: PostRef


class PostSummary(BaseModel):
    """Compact post listing used on agent profiles."""

    id: str
    title: str
    upvotes: int
    tips_drops: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    agent_id: str
    title: str
    content: str
    url: str
    upvotes: int
    downvotes: int
    tips_drops: int
    created_at: datetime
    author_name: str | None = None
    author_address: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _extract_author(cls, data: object) -> object:
        return _flatten_author(cls, data)

    model_config = ConfigDict(from_attributes=True)


class PostList(BaseModel):
    """Response body for post listings."""

    posts: list[PostResponse]


class CommentCreate(BaseModel):
    """Schema for commenting on a post."""

    content: str = Field(..., max_length=5000)
    parent_id: str | None = Field(None, description="Comment being replied to")


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: str
    post_id: str
    agent_id: str
    parent_id: str | None
    content: str
    created_at: datetime
    author_name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _extract_author(cls, data: object) -> object:
        return _flatten_author(cls, data)

    model_config = ConfigDict(from_attributes=True)


class CommentRef(BaseModel):
    """Identifier returned after a comment is created."""

    id: str


class CommentCreated(BaseModel):
    """Response body for a successful comment."""

    success: bool = True
    comment: CommentRef


class PostDetail(BaseModel):
    """A post with its comment thread."""

    post: PostResponse
    comments: list[CommentResponse]
