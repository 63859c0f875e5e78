"""Account repository. Interface methods return application DTOs (never the digest,
except get_password_hash for the authentication manager)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.account import AccountCreate, AccountResult, AccountUpdate
from app.domain.exceptions import AccountAlreadyExistsException
from app.infrastructure.persistence.models.account import Account
from app.infrastructure.persistence.repositories.base import BaseRepository


def _account_to_result(a: Account) -> AccountResult:
    """Map ORM Account to application AccountResult (no password)."""
    return AccountResult(
        id=a.id,
        username=a.username,
        display_name=a.display_name,
        avatar=a.avatar,
    )


class AccountRepository(BaseRepository[Account]):
    """Account repository. Unique username violations become AccountAlreadyExistsException."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Account)

    async def _get_model_by_username(self, username: str) -> Account | None:
        result = await self.db.execute(
            select(Account).where(Account.username == username)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, account_id: int) -> AccountResult | None:
        account = await self.get_model(account_id)
        return _account_to_result(account) if account else None

    async def get_by_username(self, username: str) -> AccountResult | None:
        account = await self._get_model_by_username(username)
        return _account_to_result(account) if account else None

    async def get_password_hash(self, username: str) -> str | None:
        account = await self._get_model_by_username(username)
        return account.password_hash if account else None

    async def list_accounts(
        self, skip: int = 0, limit: int = 100
    ) -> list[AccountResult]:
        accounts = await self.get_all_models(skip=skip, limit=limit)
        return [_account_to_result(a) for a in accounts]

    async def create_account(
        self, data: AccountCreate, password_hash: str
    ) -> AccountResult:
        """Create account; raise AccountAlreadyExistsException on unique constraint violation."""
        account = Account(
            username=data.username,
            display_name=data.display_name,
            avatar=data.avatar,
            password_hash=password_hash,
        )
        try:
            created = await self.add(account)
        except IntegrityError:
            raise AccountAlreadyExistsException(data.username) from None
        return _account_to_result(created)

    async def update_account(
        self, data: AccountUpdate, password_hash: str | None
    ) -> AccountResult | None:
        """Update profile; digest only when password_hash is given.

        Raises AccountAlreadyExistsException on unique constraint (username taken).
        """
        account = await self.get_model(data.id)
        if account is None:
            return None
        account.username = data.username
        account.display_name = data.display_name
        account.avatar = data.avatar
        if password_hash is not None:
            account.password_hash = password_hash
        try:
            updated = await self.flush_update(account)
        except IntegrityError:
            raise AccountAlreadyExistsException(
                data.username, "Username already taken by another account"
            ) from None
        return _account_to_result(updated)
