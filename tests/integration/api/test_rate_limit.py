import pytest
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.services.in_memory_rate_limiter import InMemoryRateLimiter
from src.api.app import create_app


@pytest.mark.asyncio
async def test_101st_request_in_window_is_rejected(client: AsyncClient, clock):
    for _ in range(100):
        response = await client.get("/health")
        assert response.status_code == 200

    response = await client.get("/health")

    assert response.status_code == 429
    data = response.json()
    assert data["code"] == "RATE_LIMITED"
    assert "error" in data
    assert response.headers["Retry-After"] == "60"


@pytest.mark.asyncio
async def test_admission_resumes_after_window(client: AsyncClient, clock):
    for _ in range(101):
        await client.get("/health")

    clock.advance(61)

    assert (await client.get("/health")).status_code == 200


@pytest.mark.asyncio
async def test_limit_applies_regardless_of_authentication(client: AsyncClient, clock):
    for _ in range(100):
        await client.post("/api/auth/verify")

    response = await client.post("/api/auth/verify", headers={"Authorization": "Bearer x"})

    assert response.status_code == 429


@pytest.mark.asyncio
async def test_proxy_header_keys_clients(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "CLIENT_IP_HEADER", "X-Forwarded-For")
    app = create_app(ApplicationConfig, rate_limiter=InMemoryRateLimiter(max_requests=2))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as proxied:
        first = {"X-Forwarded-For": "203.0.113.5, 10.0.0.1"}
        second = {"X-Forwarded-For": "198.51.100.7"}
        assert (await proxied.get("/health", headers=first)).status_code == 200
        assert (await proxied.get("/health", headers=first)).status_code == 200
        assert (await proxied.get("/health", headers=first)).status_code == 429
        assert (await proxied.get("/health", headers=second)).status_code == 200
