"""
Diabetes Diagnosis API — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own SQLite file database (aiosqlite driver), so
       tests run without PostgreSQL and never share rows.

Fixture Hierarchy:
    database          empty schema in tmp_path/test.db
    seeded_database   database + setup_database() seed rows
    gateway           QueryGateway of `seeded_database`
    mock_gateway      AsyncMock standing in for QueryGateway (failure paths)
    test_client       HTTPX AsyncClient bound to create_app(seeded_database)
"""

import os
import tempfile
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any diabetes_api import so the settings singleton (and the
# module-level app in main.py) never point at a real PostgreSQL server
_scratch = tempfile.mkdtemp(prefix="diabetes_api_test_")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(_scratch, "module_app.db")
os.environ["FRONTEND_DIR"] = os.path.join(_scratch, "no-frontend")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "test"

from diabetes_api.database import Database  # noqa: E402
from diabetes_api.gateway import QueryGateway  # noqa: E402
from diabetes_api.setup_database import setup_database  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(tmp_path):
    """An empty schema in a fresh SQLite file."""
    db = Database.from_url(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def seeded_database(database):
    """`database` after the setup script has inserted its seed rows."""
    await setup_database(database)
    return database


@pytest.fixture
def gateway(seeded_database) -> QueryGateway:
    return seeded_database.gateway


@pytest.fixture
def mock_gateway():
    """
    A QueryGateway double; every method is an AsyncMock.

    Usage:
        mock_gateway.fetch_one.side_effect = DatabaseError(detail="connection refused")
    """
    return AsyncMock(spec=QueryGateway)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(seeded_database):
    from diabetes_api.main import create_app

    return create_app(database=seeded_database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Background tasks (the diagnosis side write) finish before each
    request returns.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
