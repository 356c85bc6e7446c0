"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without any
database file.  The app fixture enters the FastAPI lifespan directly, because
``httpx.ASGITransport`` does not send lifespan events.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from rides_api.api.app import create_app
from rides_api.config import Settings
from rides_api.domain.entities import RideFields
from rides_api.infrastructure.database import Database
from rides_api.infrastructure.repositories import RideRepository

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_fields(index: int = 1, **overrides) -> RideFields:
    values = dict(
        start_lat=90,
        start_long=180,
        end_lat=-90,
        end_long=-180,
        rider_name=f"Rider #{index}",
        driver_name=f"Driver #{index}",
        driver_vehicle=f"Vehicle #{index}",
    )
    values.update(overrides)
    return RideFields(**values)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=TEST_DB_URL,
        rate_limit_enabled=False,
        log_to_file=False,
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def ride_payload() -> dict:
    return {
        "start_lat": 90,
        "start_long": 180,
        "end_lat": -90,
        "end_long": -180,
        "rider_name": "Jane Doe",
        "driver_name": "John Doe",
        "driver_vehicle": "Car",
    }


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Connected in-memory database, disposed after the test."""
    db = Database(TEST_DB_URL)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
def store(database: Database) -> RideRepository:
    return RideRepository(database)


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
