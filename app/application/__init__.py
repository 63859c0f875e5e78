"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, hasher, token issuer).
"""

from app.application.interfaces import (
    IAccountRepository,
    IAuthenticationManager,
    IPasswordHasher,
    IPostRepository,
    ITokenIssuer,
)
from app.application.services.account_service import AccountService
from app.application.services.post_service import PostService

__all__ = [
    "AccountService",
    "IAccountRepository",
    "IAuthenticationManager",
    "IPasswordHasher",
    "IPostRepository",
    "ITokenIssuer",
    "PostService",
]
