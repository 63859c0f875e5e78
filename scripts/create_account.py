"""Register an account from the command line (same rules as POST /accounts/register).

Usage:
    python -m scripts.create_account <username> <display_name> [password]
If password is omitted, a random one is printed.
All imports use app.*.
"""

import asyncio
import secrets
import sys

from pydantic import ValidationError

from app.application.dtos.account import AccountCreate
from app.application.services.account_service import AccountService
from app.core.config import get_settings
from app.domain.exceptions import AccountAlreadyExistsException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import AccountRepository
from app.infrastructure.security import (
    AuthenticationManager,
    BcryptPasswordHasher,
    JwtTokenIssuer,
)
from app.schemas.account import AccountCreateRequest


async def main() -> None:
    """Create account; exit 1 on invalid input or when the username is taken."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_account <username> <display_name> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    display_name = sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)
    try:
        request = AccountCreateRequest(
            username=username, display_name=display_name, password=password
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(p) for p in error["loc"])
            print(f"{field}: {error['msg']}", file=sys.stderr)
        sys.exit(1)

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                account_repo = AccountRepository(session)
                hasher = BcryptPasswordHasher()
                service = AccountService(
                    account_repo=account_repo,
                    password_hasher=hasher,
                    token_issuer=JwtTokenIssuer(),
                    authentication_manager=AuthenticationManager(account_repo, hasher),
                )
                try:
                    account = await service.register(
                        AccountCreate(
                            username=request.username,
                            display_name=request.display_name,
                            password=request.password,
                        )
                    )
                except AccountAlreadyExistsException as e:
                    print(e.message, file=sys.stderr)
                    sys.exit(1)
        print(f"Created account: {account.id} ({account.username})")
        if len(sys.argv) <= 3:
            print(f"Password: {password}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
