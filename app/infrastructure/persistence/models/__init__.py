"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin
from app.infrastructure.persistence.models.post import Post

__all__ = [
    "Account",
    "IntegerIdMixin",
    "Post",
    "TimestampMixin",
]
