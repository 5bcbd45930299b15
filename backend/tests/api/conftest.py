"""API test fixtures — FastAPI test client over a fresh SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - get_today pinned to TODAY so due-status and export names are deterministic
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

import herdbook.infrastructure.database as db_module
from herdbook.api.dependencies import get_today
from herdbook.infrastructure.database import DatabaseSessionManager, get_db
from herdbook.main import app

TODAY = date(2026, 10, 18)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def cow(client):
    """An active animal for yield-record tests."""
    res = await client.post("/api/v1/animals", json={"animal_id": "COW-001", "target_milk": 12})
    assert res.status_code == 201
    return res.json()
