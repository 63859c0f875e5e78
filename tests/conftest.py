"""Pytest configuration and fixtures for redesocial.

Environment is set before app.main is imported so create_app() sees it.
Every test that uses db_engine (directly or through client/db_session) gets
a fresh SQLite database file under tmp_path with the schema created from
the ORM metadata.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence import database, models  # noqa: E402,F401
from app.infrastructure.persistence.database import Base  # noqa: E402
from app.main import app  # noqa: E402

DEFAULT_PASSWORD = "password123"


@pytest.fixture
async def db_engine(tmp_path, monkeypatch):
    """Fresh SQLite database for one test; engine disposed afterwards."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    get_settings.cache_clear()
    await database.dispose_engine()
    database._ensure_engine()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield database.engine
    await database.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    """Session for repository/integration tests. Rolls back after test."""
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_engine) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def register_account(
    client: AsyncClient,
    username: str,
    display_name: str | None = None,
    password: str = DEFAULT_PASSWORD,
    avatar: str | None = None,
) -> dict:
    """POST /accounts/register and return the created account JSON."""
    response = await client.post(
        "/api/v1/accounts/register",
        json={
            "username": username,
            "display_name": display_name or username.title(),
            "password": password,
            "avatar": avatar,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def login_headers(
    client: AsyncClient, username: str, password: str = DEFAULT_PASSWORD
) -> dict[str, str]:
    """Log in and return headers with the bearer token from the login response."""
    response = await client.post(
        "/api/v1/accounts/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": response.json()["token"]}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Register "alice" and return her Authorization header."""
    await register_account(client, "alice", "Alice")
    return await login_headers(client, "alice")
