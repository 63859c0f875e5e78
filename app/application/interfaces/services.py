"""Service interfaces (ports) for the application layer.

Protocols define contracts for credential hashing, token issuance and
authentication (DIP). Implementations live in app.infrastructure.security.
"""

from __future__ import annotations

from typing import Protocol


# Password hasher interface
class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Return the digest of password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash."""


# Token issuer interface
class ITokenIssuer(Protocol):
    """Protocol for signed access tokens."""

    def issue(self, subject: str, account_id: int) -> str:
        """Return a signed token asserting subject and account_id (with expiry)."""


# Authentication manager interface
class IAuthenticationManager(Protocol):
    """Protocol for credential verification against stored digests."""

    async def authenticate(self, username: str, password: str) -> None:
        """Return if credentials are valid; raise AuthenticationException otherwise."""
