"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.account import (
        AccountCreate,
        AccountResult,
        AccountUpdate,
    )
    from app.application.dtos.post import PostCreate, PostResult, PostUpdate


# Account repository interface
class IAccountRepository(Protocol):
    """Protocol for account repository (DIP)."""

    async def get_by_id(self, account_id: int) -> AccountResult | None:
        """Return account by ID."""

    async def get_by_username(self, username: str) -> AccountResult | None:
        """Return account by username (case-sensitive)."""

    async def get_password_hash(self, username: str) -> str | None:
        """Return the stored password digest for username, or None if unknown."""

    async def list_accounts(
        self, skip: int = 0, limit: int = 100
    ) -> list[AccountResult]:
        """Return accounts with pagination (oldest first)."""

    async def create_account(
        self, data: AccountCreate, password_hash: str
    ) -> AccountResult:
        """Insert a new account; raise AccountAlreadyExistsException on duplicate username."""

    async def update_account(
        self, data: AccountUpdate, password_hash: str | None
    ) -> AccountResult | None:
        """Update profile fields (and digest when given). None if the account does not exist."""


# Post repository interface
class IPostRepository(Protocol):
    """Protocol for post repository (DIP)."""

    async def get_by_id(self, post_id: int) -> PostResult | None:
        """Return post by ID."""

    async def list_posts(self, skip: int = 0, limit: int = 100) -> list[PostResult]:
        """Return posts, newest first."""

    async def search_by_title(self, title: str) -> list[PostResult]:
        """Return posts whose title contains title (case-insensitive)."""

    async def create_post(self, data: PostCreate, author_id: int | None) -> PostResult:
        """Insert a new post."""

    async def update_post(self, data: PostUpdate) -> PostResult | None:
        """Update title and body. None if the post does not exist."""

    async def delete_by_id(self, post_id: int) -> bool:
        """Delete post. Return False if it did not exist."""
