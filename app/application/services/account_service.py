"""Account application service: registration, profile update, authentication."""

from __future__ import annotations

import asyncio
import logging

from app.application.dtos.account import (
    AccountCreate,
    AccountResult,
    AccountUpdate,
    LoginAttempt,
    LoginResult,
)
from app.application.interfaces.repositories import IAccountRepository
from app.application.interfaces.services import (
    IAuthenticationManager,
    IPasswordHasher,
    ITokenIssuer,
)
from app.domain.exceptions import (
    AccountAlreadyExistsException,
    AuthenticationException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)

TOKEN_SCHEME = "Bearer"


class AccountService:
    """Register accounts, update profiles and issue tokens on login.

    Username uniqueness is checked here as an early reject; the repository's
    unique constraint is authoritative under concurrent writes.
    """

    def __init__(
        self,
        account_repo: IAccountRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        authentication_manager: IAuthenticationManager,
    ) -> None:
        self._account_repo = account_repo
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._authentication_manager = authentication_manager

    async def register(self, data: AccountCreate) -> AccountResult:
        """Create an account. Raises AccountAlreadyExistsException if username is taken."""
        if await self._account_repo.get_by_username(data.username) is not None:
            raise AccountAlreadyExistsException(data.username)
        password_hash = await asyncio.to_thread(
            self._password_hasher.hash, data.password
        )
        account = await self._account_repo.create_account(data, password_hash)
        logger.info("Account registered: id=%s username=%s", account.id, account.username)
        return account

    async def update(self, data: AccountUpdate) -> AccountResult:
        """Update profile fields; re-hash only when a new password is supplied.

        Raises:
            ResourceNotFoundException: no account with data.id.
            AccountAlreadyExistsException: data.username belongs to another account.
        """
        if await self._account_repo.get_by_id(data.id) is None:
            raise ResourceNotFoundException("account", data.id)
        holder = await self._account_repo.get_by_username(data.username)
        if holder is not None and holder.id != data.id:
            raise AccountAlreadyExistsException(
                data.username, "Username already taken by another account"
            )
        password_hash: str | None = None
        if data.password is not None:
            password_hash = await asyncio.to_thread(
                self._password_hasher.hash, data.password
            )
        updated = await self._account_repo.update_account(data, password_hash)
        if updated is None:
            raise ResourceNotFoundException("account", data.id)
        logger.info(
            "Account updated: id=%s password_changed=%s",
            updated.id,
            password_hash is not None,
        )
        return updated

    async def authenticate(self, attempt: LoginAttempt) -> LoginResult:
        """Verify credentials and return profile plus a bearer token.

        Unknown username, wrong password, and an account vanishing after
        verification all raise the same AuthenticationException.
        """
        await self._authentication_manager.authenticate(
            attempt.username, attempt.password
        )
        account = await self._account_repo.get_by_username(attempt.username)
        if account is None:
            raise AuthenticationException()
        token = self._token_issuer.issue(account.username, account.id)
        return LoginResult(
            id=account.id,
            username=account.username,
            display_name=account.display_name,
            avatar=account.avatar,
            token=f"{TOKEN_SCHEME} {token}",
            password="",
        )
