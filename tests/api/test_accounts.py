"""Tests for account endpoints: register, login, update, lookups."""

from httpx import AsyncClient

from app.infrastructure.security.jwt import create_access_token
from tests.conftest import DEFAULT_PASSWORD, login_headers, register_account


async def test_register_returns_201_without_password(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/accounts/register",
        json={
            "username": "maria@example.com",
            "display_name": "Maria",
            "password": DEFAULT_PASSWORD,
            "avatar": "https://example.com/maria.png",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["username"] == "maria@example.com"
    assert data["display_name"] == "Maria"
    assert data["avatar"] == "https://example.com/maria.png"
    assert "password" not in data
    assert "password_hash" not in data


async def test_register_missing_body_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/accounts/register", json={})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_register_short_password_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/accounts/register",
        json={"username": "bob", "display_name": "Bob", "password": "short"},
    )
    assert response.status_code == 422


async def test_register_duplicate_username_returns_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """Second registration of "alice" fails and only one alice is stored."""
    response = await client.post(
        "/api/v1/accounts/register",
        json={
            "username": "alice",
            "display_name": "Another Alice",
            "password": "otherpass456",
        },
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "ACCOUNT_ALREADY_EXISTS"
    assert body["message"] == "Account already exists"

    listing = await client.get("/api/v1/accounts", headers=auth_headers)
    assert [a["username"] for a in listing.json()].count("alice") == 1
    # original password still valid
    await login_headers(client, "alice")


async def test_username_is_case_sensitive(client: AsyncClient) -> None:
    await register_account(client, "carol")
    await register_account(client, "Carol")


async def test_login_returns_profile_token_and_empty_password(
    client: AsyncClient,
) -> None:
    account = await register_account(
        client, "dave", "Dave", avatar="https://example.com/d.png"
    )
    response = await client.post(
        "/api/v1/accounts/login",
        json={"username": "dave", "password": DEFAULT_PASSWORD},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == account["id"]
    assert data["display_name"] == "Dave"
    assert data["avatar"] == "https://example.com/d.png"
    assert data["password"] == ""
    assert data["token"].startswith("Bearer ")
    assert len(data["token"]) > len("Bearer ")


async def test_login_twice_returns_same_profile(client: AsyncClient) -> None:
    await register_account(client, "erin", "Erin")
    first = await client.post(
        "/api/v1/accounts/login",
        json={"username": "erin", "password": DEFAULT_PASSWORD},
    )
    second = await client.post(
        "/api/v1/accounts/login",
        json={"username": "erin", "password": DEFAULT_PASSWORD},
    )
    a, b = first.json(), second.json()
    assert (a["id"], a["display_name"], a["avatar"]) == (
        b["id"],
        b["display_name"],
        b["avatar"],
    )
    assert a["token"] and b["token"]


async def test_login_unknown_user_and_wrong_password_are_indistinguishable(
    client: AsyncClient,
) -> None:
    """Both failures return 401 with the same body (no username enumeration)."""
    await register_account(client, "frank")
    unknown = await client.post(
        "/api/v1/accounts/login",
        json={"username": "nouser", "password": "x"},
    )
    wrong = await client.post(
        "/api/v1/accounts/login",
        json={"username": "frank", "password": "wrong-password"},
    )
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()
    assert unknown.json()["message"] == "Invalid credentials"


async def test_login_token_grants_access_to_me(client: AsyncClient) -> None:
    account = await register_account(client, "grace", "Grace")
    headers = await login_headers(client, "grace")
    response = await client.get("/api/v1/accounts/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == account["id"]


async def test_protected_endpoint_without_token_returns_401(
    client: AsyncClient,
) -> None:
    response = await client.get("/api/v1/accounts/me")
    assert response.status_code == 401
    assert response.json()["message"] == "Not authenticated"


async def test_protected_endpoint_with_garbage_token_returns_401(
    client: AsyncClient,
) -> None:
    response = await client.get(
        "/api/v1/accounts/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_token_without_account_id_claim_returns_401(client: AsyncClient) -> None:
    await register_account(client, "olga", "Olga")
    token = create_access_token({"sub": "olga"})
    response = await client.get(
        "/api/v1/accounts/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401


async def test_get_account_by_id(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    other = await register_account(client, "heidi", "Heidi")
    response = await client.get(
        f"/api/v1/accounts/{other['id']}", headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["username"] == "heidi"


async def test_get_unknown_account_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/accounts/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_update_keeping_own_username_succeeds(client: AsyncClient) -> None:
    account = await register_account(client, "ivan", "Ivan")
    headers = await login_headers(client, "ivan")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": account["id"], "username": "ivan", "display_name": "Ivan R."},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["display_name"] == "Ivan R."
    # no password sent: stored password unchanged
    await login_headers(client, "ivan", DEFAULT_PASSWORD)


async def test_update_with_new_password_replaces_it(client: AsyncClient) -> None:
    account = await register_account(client, "judy", "Judy")
    headers = await login_headers(client, "judy")
    response = await client.put(
        "/api/v1/accounts",
        json={
            "id": account["id"],
            "username": "judy",
            "display_name": "Judy",
            "password": "brand-new-pass",
        },
        headers=headers,
    )
    assert response.status_code == 200
    old = await client.post(
        "/api/v1/accounts/login",
        json={"username": "judy", "password": DEFAULT_PASSWORD},
    )
    assert old.status_code == 401
    await login_headers(client, "judy", "brand-new-pass")


async def test_update_rename_to_taken_username_returns_400(
    client: AsyncClient,
) -> None:
    await register_account(client, "x", "Account X")
    b = await register_account(client, "y", "Account Y")
    headers = await login_headers(client, "y")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": b["id"], "username": "x", "display_name": "Renamed"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already taken by another account"

    stored = await client.get(f"/api/v1/accounts/{b['id']}", headers=headers)
    assert stored.json()["username"] == "y"
    assert stored.json()["display_name"] == "Account Y"


async def test_update_rename_to_free_username_changes_login(
    client: AsyncClient,
) -> None:
    account = await register_account(client, "kate", "Kate")
    headers = await login_headers(client, "kate")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": account["id"], "username": "katherine", "display_name": "Kate"},
        headers=headers,
    )
    assert response.status_code == 200
    await login_headers(client, "katherine")


async def test_token_issued_before_rename_is_rejected(client: AsyncClient) -> None:
    """After a rename, the old token no longer names a live account; log in again."""
    account = await register_account(client, "liam", "Liam")
    old_headers = await login_headers(client, "liam")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": account["id"], "username": "liam2", "display_name": "Liam"},
        headers=old_headers,
    )
    assert response.status_code == 200

    me = await client.get("/api/v1/accounts/me", headers=old_headers)
    assert me.status_code == 401

    new_headers = await login_headers(client, "liam2")
    me = await client.get("/api/v1/accounts/me", headers=new_headers)
    assert me.status_code == 200
    assert me.json()["id"] == account["id"]


async def test_token_does_not_follow_reused_username(client: AsyncClient) -> None:
    """A token for a renamed account must not resolve to a new holder of the old name."""
    alice = await register_account(client, "alice", "Alice")
    alice_old_headers = await login_headers(client, "alice")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": alice["id"], "username": "alice2", "display_name": "Alice"},
        headers=alice_old_headers,
    )
    assert response.status_code == 200
    newcomer = await register_account(client, "alice", "Newcomer")
    assert newcomer["id"] != alice["id"]

    me = await client.get("/api/v1/accounts/me", headers=alice_old_headers)
    assert me.status_code == 401

    takeover = await client.put(
        "/api/v1/accounts",
        json={
            "id": newcomer["id"],
            "username": "alice",
            "display_name": "Taken over",
            "password": "other-pass-123",
        },
        headers=alice_old_headers,
    )
    assert takeover.status_code == 401
    await login_headers(client, "alice")


async def test_update_other_account_returns_403(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    other = await register_account(client, "mallory", "Mallory")
    response = await client.put(
        "/api/v1/accounts",
        json={"id": other["id"], "username": "mallory", "display_name": "Hacked"},
        headers=auth_headers,
    )
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"
