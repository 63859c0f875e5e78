"""Authentication manager: verify username/password against the stored digest."""

from __future__ import annotations

import asyncio
import logging

from app.application.interfaces.repositories import IAccountRepository
from app.application.interfaces.services import IPasswordHasher
from app.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

# Lazy dummy hash for constant-time comparison when the account is not found
# (timing-attack mitigation). Computed on first use in a thread.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash(hasher: IPasswordHasher) -> str:
    """Return a valid hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(hasher.hash, "not-a-real-password")
    return _dummy_hash_cache


class AuthenticationManager:
    """IAuthenticationManager over an account repository and a password hasher."""

    def __init__(
        self, account_repo: IAccountRepository, password_hasher: IPasswordHasher
    ) -> None:
        self._account_repo = account_repo
        self._password_hasher = password_hasher

    async def authenticate(self, username: str, password: str) -> None:
        """Raise AuthenticationException unless password matches username's digest."""
        password_hash = await self._account_repo.get_password_hash(username)
        if password_hash is None:
            dummy_hash = await _get_dummy_hash(self._password_hasher)
            await asyncio.to_thread(self._password_hasher.verify, password, dummy_hash)
            logger.warning("Login failed: unknown username")
            raise AuthenticationException()
        if not await asyncio.to_thread(
            self._password_hasher.verify, password, password_hash
        ):
            logger.warning("Login failed: wrong password for username=%s", username)
            raise AuthenticationException()
