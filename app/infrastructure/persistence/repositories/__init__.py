"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.account_repo import AccountRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.post_repo import PostRepository

__all__ = [
    "AccountRepository",
    "BaseRepository",
    "PostRepository",
]
