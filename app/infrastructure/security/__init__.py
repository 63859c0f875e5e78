"""Security: JWT, password hashing, and credential verification."""

from app.infrastructure.security.authentication import AuthenticationManager
from app.infrastructure.security.jwt import (
    JwtTokenIssuer,
    create_access_token,
    verify_token,
)
from app.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)

__all__ = [
    "AuthenticationManager",
    "BcryptPasswordHasher",
    "JwtTokenIssuer",
    "create_access_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
