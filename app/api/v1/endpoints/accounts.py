"""Accounts API: register, login, profile update and lookups.

Register and login are public; everything else requires
Authorization: Bearer <token>. Domain exceptions raised by AccountService
are mapped to HTTP responses by app.core.exception_handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_account_repo,
    get_account_service,
    get_current_account,
    get_login_service,
)
from app.application.dtos.account import (
    AccountCreate,
    AccountResult,
    AccountUpdate,
    LoginAttempt,
)
from app.application.services.account_service import AccountService
from app.core.limiter import limit_auth, limit_writes
from app.domain.exceptions import AuthorizationException, ResourceNotFoundException
from app.infrastructure.persistence.repositories import AccountRepository
from app.schemas.account import (
    AccountCreateRequest,
    AccountResponse,
    AccountUpdateRequest,
    LoginRequest,
    LoginResponse,
)

router = APIRouter()


@router.post("/register", response_model=AccountResponse, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: AccountCreateRequest,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new account. 400 when the username is already taken."""
    account = await account_service.register(
        AccountCreate(
            username=body.username,
            display_name=body.display_name,
            avatar=body.avatar,
            password=body.password,
        )
    )
    return AccountResponse.model_validate(account)


@router.post("/login", response_model=LoginResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    account_service: Annotated[AccountService, Depends(get_login_service)],
):
    """Authenticate with username and password; return profile and bearer token.

    Unknown username and wrong password both return 401 "Invalid credentials".
    """
    result = await account_service.authenticate(
        LoginAttempt(username=body.username, password=body.password)
    )
    return LoginResponse.model_validate(result)


@router.get("", response_model=list[AccountResponse])
async def list_accounts(
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    account_repo: Annotated[AccountRepository, Depends(get_account_repo)],
    skip: int = 0,
    limit: int = 100,
):
    """List accounts (paginated)."""
    accounts = await account_repo.list_accounts(skip=skip, limit=limit)
    return [AccountResponse.model_validate(a) for a in accounts]


@router.get("/me", response_model=AccountResponse)
async def get_me(
    current_account: Annotated[AccountResult, Depends(get_current_account)],
):
    """Return the account the bearer token belongs to."""
    return AccountResponse.model_validate(current_account)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: int,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    account_repo: Annotated[AccountRepository, Depends(get_account_repo)],
):
    """Get account by id."""
    account = await account_repo.get_by_id(account_id)
    if account is None:
        raise ResourceNotFoundException("account", account_id)
    return AccountResponse.model_validate(account)


@router.put("", response_model=AccountResponse)
@limit_writes
async def update_account(
    request: Request,
    body: AccountUpdateRequest,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Update the current account. Password changes only when a new one is sent."""
    if body.id != current_account.id:
        raise AuthorizationException("account", "update")
    updated = await account_service.update(
        AccountUpdate(
            id=body.id,
            username=body.username,
            display_name=body.display_name,
            avatar=body.avatar,
            password=body.password,
        )
    )
    return AccountResponse.model_validate(updated)
