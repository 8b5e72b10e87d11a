"""
Astro Backend — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment overrides are applied before any `astro` import, so the
       settings singleton, the engine and the logo service all point at a
       throwaway SQLite file and storage directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── temp_storage:    Temporary directory for logo storage tests
    ├── png_bytes:       A real 1x1 PNG for upload tests
    ├── database:        Fresh schema + sample dashboard in the SQLite file
    ├── test_client:     HTTPX AsyncClient against the FastAPI app
    └── api_client:      astro.client.ApiClient against the FastAPI app
"""

import base64
import os
import tempfile

# Must run before `astro.config` is imported anywhere
_TEST_DIR = tempfile.mkdtemp(prefix="astro_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["STORAGE_ROOT"] = os.path.join(_TEST_DIR, "storage")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["RETRY_MIN_WAIT"] = "0"
os.environ["RETRY_MAX_WAIT"] = "0"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# ══════════════════════════════════════════════════════════════════════════
# Unit-test helpers
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        async def test_get(mock_db_session):
            result = mock_db_session.execute.return_value
            result.unique.return_value.scalar_one_or_none.return_value = entity
    """
    session = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def temp_storage(tmp_path):
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def png_bytes():
    return PNG_1X1


# ══════════════════════════════════════════════════════════════════════════
# Integration fixtures (real SQLite database)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    Recreate the schema and seed the sample dashboard.

    ASGITransport does not run the app lifespan, so the bootstrap that
    startup would do happens here instead.
    """
    from astro.config import settings
    from astro.database import async_session_factory, create_schema, drop_schema
    from astro.seed import seed_database

    await drop_schema()
    await create_schema()
    async with async_session_factory() as session:
        await seed_database(session, settings.config_id)
        await session.commit()
    yield
    await drop_schema()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/healthz")
            assert response.status_code == 200
    """
    from astro.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api_client(database):
    """The dashboard's own fetcher, talking to the app in-process."""
    from astro.client.fetcher import ApiClient
    from astro.main import app

    async with ApiClient(base_url="http://test", transport=ASGITransport(app=app)) as client:
        yield client
