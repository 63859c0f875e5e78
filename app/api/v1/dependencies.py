"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and application
services. Services are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.account import AccountResult
from app.application.services.account_service import AccountService
from app.application.services.post_service import PostService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    AccountRepository,
    PostRepository,
)
from app.infrastructure.security.authentication import AuthenticationManager
from app.infrastructure.security.jwt import (
    ACCOUNT_ID_CLAIM,
    JwtTokenIssuer,
    verify_token,
)
from app.infrastructure.security.password import BcryptPasswordHasher

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


# ---- Repositories ----


async def get_account_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccountRepository:
    """Account repository on a read-only session."""
    return AccountRepository(db)


async def get_account_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> AccountRepository:
    """Account repository on a transactional session (commit on success)."""
    return AccountRepository(db)


async def get_post_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostRepository:
    return PostRepository(db)


async def get_post_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PostRepository:
    return PostRepository(db)


# ---- Security collaborators ----


def get_password_hasher() -> BcryptPasswordHasher:
    """Password hasher (composition root)."""
    return BcryptPasswordHasher()


def get_token_issuer() -> JwtTokenIssuer:
    """JWT issuer using settings.access_token_expire_minutes."""
    return JwtTokenIssuer()


# ---- Services ----


def _build_account_service(
    account_repo: AccountRepository,
    password_hasher: BcryptPasswordHasher,
    token_issuer: JwtTokenIssuer,
) -> AccountService:
    return AccountService(
        account_repo=account_repo,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        authentication_manager=AuthenticationManager(account_repo, password_hasher),
    )


async def get_account_service(
    account_repo: Annotated[AccountRepository, Depends(get_account_repo_for_write)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AccountService:
    """AccountService for register/update (transactional session)."""
    return _build_account_service(account_repo, password_hasher, token_issuer)


async def get_login_service(
    account_repo: Annotated[AccountRepository, Depends(get_account_repo)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AccountService:
    """AccountService for authenticate (read-only session)."""
    return _build_account_service(account_repo, password_hasher, token_issuer)


async def get_post_service(
    post_repo: Annotated[PostRepository, Depends(get_post_repo_for_write)],
) -> PostService:
    """PostService for create/update/delete (transactional session)."""
    return PostService(post_repo)


async def get_post_query_service(
    post_repo: Annotated[PostRepository, Depends(get_post_repo)],
) -> PostService:
    """PostService for list/get/search (read-only session)."""
    return PostService(post_repo)


# ---- Current account ----


async def get_current_account_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    account_repo: Annotated[AccountRepository, Depends(get_account_repo)],
) -> AccountResult | None:
    """Return current account from JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
    username = payload.get("sub")
    account_id = payload.get(ACCOUNT_ID_CLAIM)
    if not username or account_id is None:
        return None
    account = await account_repo.get_by_username(username)
    # Username renamed away or taken over by another account since login
    if account is None or account.id != account_id:
        return None
    return account


async def get_current_account(
    current_account: Annotated[
        AccountResult | None, Depends(get_current_account_optional)
    ],
) -> AccountResult:
    """Return current account from JWT; raise 401 if missing or invalid."""
    if current_account is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_account
