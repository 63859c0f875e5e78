"""Pydantic request/response schemas for the API."""

from app.schemas.account import (
    AccountCreateRequest,
    AccountResponse,
    AccountUpdateRequest,
    LoginRequest,
    LoginResponse,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.post import PostCreateRequest, PostResponse, PostUpdateRequest

__all__ = [
    "AccountCreateRequest",
    "AccountResponse",
    "AccountUpdateRequest",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "PostCreateRequest",
    "PostResponse",
    "PostUpdateRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
]
