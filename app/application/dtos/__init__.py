"""Application DTOs (no ORM dependency)."""

from app.application.dtos.account import (
    AccountCreate,
    AccountResult,
    AccountUpdate,
    LoginAttempt,
    LoginResult,
)
from app.application.dtos.post import PostCreate, PostResult, PostUpdate

__all__ = [
    "AccountCreate",
    "AccountResult",
    "AccountUpdate",
    "LoginAttempt",
    "LoginResult",
    "PostCreate",
    "PostResult",
    "PostUpdate",
]
