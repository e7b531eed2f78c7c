"""
Restaurant Finder - Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points the application at a throw-away SQLite database and a temporary
       public directory BEFORE any application import, then provides
       per-test fixtures on top.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: AsyncMock session for service-level tests
    ├── upload_service: UploadService rooted in tmp_path, wired into routes
    ├── sample_jpeg_bytes / sample_restaurant: upload and body payloads
    ├── db_tables: creates the schema, drops it and disposes the pool after
    └── test_client: HTTPX AsyncClient over ASGITransport (uses db_tables)
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before restaurant_finder.config builds its settings singleton
_TEST_ROOT = tempfile.mkdtemp(prefix="restaurant_finder_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT}/test.db"
os.environ["PUBLIC_ROOT"] = os.path.join(_TEST_ROOT, "public")
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A MagicMock simulating AsyncSession for service tests.

    Usage:
        mock_db_session.execute.return_value = make_result([{"id": 1, ...}])
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_result():
    """Builds a fake SQLAlchemy result returning the given row dicts."""

    def _make(rows):
        result = MagicMock()
        result.returns_rows = True
        result.mappings.return_value.all.return_value = rows
        return result

    return _make


@pytest.fixture
def upload_service(tmp_path, monkeypatch):
    """
    An UploadService writing under tmp_path, swapped into the upload routes.
    """
    from restaurant_finder.routes import upload as upload_routes
    from restaurant_finder.services.upload_service import UploadService

    service = UploadService(uploads_root=str(tmp_path / "uploads"))
    monkeypatch.setattr(upload_routes, "upload_service", service)
    return service


@pytest.fixture
def sample_jpeg_bytes():
    """
    Minimal JPEG: Start of Image (FFD8) + JFIF marker + End of Image (FFD9).
    """
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )


@pytest.fixture
def sample_restaurant():
    return {
        "rname": "Cafe X",
        "location": "Downtown",
        "price_range": "$$",
        "image_url": "/uploads/Images/123.png",
    }


@pytest_asyncio.fixture
async def db_tables():
    """Creates the schema for one test and tears it down afterwards."""
    from restaurant_finder.database import Base, engine
    from restaurant_finder.models.restaurant import Restaurant  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled connections belong to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from restaurant_finder.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
