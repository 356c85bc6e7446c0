"""Rate limiting: per-client request budget over a rolling window."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from rides_api.api.app import create_app
from rides_api.api.middleware import limiter, rate_limit


@pytest.fixture
def limited_settings(settings):
    return settings.model_copy(update={"rate_limit_enabled": True, "rate_limit_max": 2})


async def _statuses(settings, method: str, path: str, count: int, **kwargs) -> list[int]:
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            return [
                (await ac.request(method, path, **kwargs)).status_code
                for _ in range(count)
            ]


@pytest.mark.asyncio
async def test_list_over_limit_is_rejected(limited_settings):
    assert await _statuses(limited_settings, "GET", "/rides", 3) == [200, 200, 429]


@pytest.mark.asyncio
async def test_get_by_id_over_limit_is_rejected(limited_settings):
    assert await _statuses(limited_settings, "GET", "/rides/1", 3) == [200, 200, 429]


@pytest.mark.asyncio
async def test_create_over_limit_is_rejected(limited_settings, ride_payload):
    statuses = await _statuses(limited_settings, "POST", "/rides", 3, json=ride_payload)
    assert statuses == [200, 200, 429]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/health", "/openapi.json", "/docs"])
async def test_unlimited_routes(limited_settings, path):
    assert await _statuses(limited_settings, "GET", path, 5) == [200] * 5


@pytest.mark.asyncio
async def test_new_app_starts_with_fresh_counters(limited_settings):
    assert await _statuses(limited_settings, "GET", "/rides", 2) == [200, 200]
    assert await _statuses(limited_settings, "GET", "/rides", 2) == [200, 200]


def test_app_settings_are_applied(limited_settings):
    create_app(limited_settings)
    assert limiter.enabled is True
    assert rate_limit() == "2 per 15 minutes"


@pytest.mark.asyncio
async def test_disabled_limiter(client: AsyncClient):
    statuses = [(await client.get("/rides")).status_code for _ in range(5)]
    assert statuses == [200] * 5
