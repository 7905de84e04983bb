"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok.

    The ASGI test transport does not run lifespan, so no store is attached
    and the embed cache reports unavailable.
    """
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["meta_store"] == "redis"
    assert data["meta_store_available"] is False
