"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os
import tempfile
from pathlib import Path

# keep log files out of the working tree; must happen before settings are cached
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "sharednotes-test-logs"))

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from sharednotes.database import Database, get_database
from sharednotes.main import app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DB_NAME = "sharednotes-test"


@pytest.fixture
async def database():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    db = Database(engine, name=TEST_DB_NAME)
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def test_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def test_app(database):
    """App with the shared database handle injected."""
    app.dependency_overrides[get_database] = lambda: database
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
