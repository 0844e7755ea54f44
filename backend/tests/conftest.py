"""
Aviary Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── make_bird: Factory for transient Bird objects
    ├── db_session: Real AsyncSession on a fresh SQLite schema
    ├── seeded_store: db_session with the four default birds committed
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports; app.config builds its singleton
# at import time
_test_dir = tempfile.mkdtemp(prefix="aviary_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/aviary_test.db"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = birds
            result = await bird_service.list_birds(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_bird():
    """
    Factory for transient (never persisted) Bird objects.

    Usage:
        bird = make_bird(1, "Grackle", "Quiscalus Quiscula")
    """
    from app.models.bird import Bird

    def _make(
        bird_id,
        name="Grackle",
        species="Quiscalus Quiscula",
        created_at=datetime(2019, 5, 9, 11, 7, 58, 188000, tzinfo=timezone.utc),
        updated_at=None,
    ):
        return Bird(
            id=bird_id,
            name=name,
            species=species,
            created_at=created_at,
            updated_at=updated_at or created_at,
        )

    return _make


@pytest_asyncio.fixture
async def db_session():
    """
    Provides a real AsyncSession on a freshly created schema.

    Tables are created before the test and dropped after it, so every test
    starts from an empty bird store.
    """
    from app.database import async_session_factory, create_tables, drop_tables

    await create_tables()
    async with async_session_factory() as session:
        yield session
    await drop_tables()


@pytest_asyncio.fixture
async def seeded_store(db_session):
    """The default birds, committed so request sessions can read them."""
    from app.seeds import seed_birds

    await seed_birds(db_session)
    await db_session.commit()
    return db_session


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport routes requests straight to the app; the lifespan (and so
    startup seeding) does not run. Dependency overrides are cleared afterwards.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
