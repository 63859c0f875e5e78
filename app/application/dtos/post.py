"""DTOs for post use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PostCreate:
    title: str
    body: str


@dataclass(frozen=True)
class PostUpdate:
    id: int
    title: str
    body: str


@dataclass(frozen=True)
class PostResult:
    """Post read-model (result of get_by_id, search_by_title, create_post, etc.)."""

    id: int
    title: str
    body: str
    author_id: int | None
    created_at: datetime
    updated_at: datetime
