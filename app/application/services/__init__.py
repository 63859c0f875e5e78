"""Application services (orchestration over repository ports)."""

from app.application.services.account_service import AccountService
from app.application.services.post_service import PostService

__all__ = [
    "AccountService",
    "PostService",
]
