"""DTOs for account use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountCreate:
    """Registration input. password is plaintext; hashed by AccountService."""

    username: str
    display_name: str
    password: str
    avatar: str | None = None


@dataclass(frozen=True)
class AccountUpdate:
    """Profile update input.

    password is a new plaintext password; None keeps the stored digest.
    """

    id: int
    username: str
    display_name: str
    avatar: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class AccountResult:
    """Account read-model (result of get_by_id, create_account, etc.). No password."""

    id: int
    username: str
    display_name: str
    avatar: str | None


@dataclass(frozen=True)
class LoginAttempt:
    """Credentials submitted for authentication."""

    username: str
    password: str


@dataclass(frozen=True)
class LoginResult:
    """Result of a successful authentication. password is always empty."""

    id: int
    username: str
    display_name: str
    avatar: str | None
    token: str
    password: str = ""
