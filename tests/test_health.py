"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_returns_ok_when_database_answers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_request_id_forwarded_when_valid(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "abc-123_DEF"}
    )
    assert response.headers.get("X-Request-ID") == "abc-123_DEF"


async def test_request_id_replaced_when_unsafe(client: AsyncClient) -> None:
    """Values with characters outside [A-Za-z0-9_-] are replaced (log injection)."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id; drop"}
    )
    request_id = response.headers.get("X-Request-ID")
    assert request_id
    assert request_id != "bad id; drop"


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "default-src 'none'" in response.headers["Content-Security-Policy"]
    assert "Strict-Transport-Security" not in response.headers


async def test_security_headers_on_error_responses(client: AsyncClient) -> None:
    response = await client.get("/api/v1/posts")
    assert response.status_code == 401
    assert response.headers["X-Content-Type-Options"] == "nosniff"
