"""Post API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreateRequest(BaseModel):
    """Request body for POST /posts. Author is the authenticated account."""

    title: str = Field(..., min_length=1, max_length=100)
    body: str = Field(..., min_length=1, max_length=1000)


class PostUpdateRequest(BaseModel):
    """Request body for PUT /posts (id identifies the post to replace)."""

    id: int
    title: str = Field(..., min_length=1, max_length=100)
    body: str = Field(..., min_length=1, max_length=1000)


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    author_id: int | None = None
    created_at: datetime
    updated_at: datetime
