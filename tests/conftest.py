"""Shared pytest fixtures for all test suites."""

import os
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from backend.app.api.deps import (
    get_activity_repository,
    get_link_repository,
    get_participant_repository,
    get_trip_repository,
)
from backend.app.db.inmemory import (
    InMemoryActivityRepository,
    InMemoryLinkRepository,
    InMemoryParticipantRepository,
    InMemoryStore,
    InMemoryTripRepository,
)
from backend.app.db.models import Base
from backend.app.mail.client import get_mail_client
from backend.app.main import app
from tests.factories import RecordingMailClient


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory tables."""
    return InMemoryStore()


@pytest.fixture
def mail_client() -> RecordingMailClient:
    """Mail client recording outgoing messages."""
    return RecordingMailClient()


@pytest.fixture
def client(store: InMemoryStore, mail_client: RecordingMailClient) -> Generator[TestClient, None, None]:
    """Test client wired to in-memory repositories and a recording mail client."""
    app.dependency_overrides[get_trip_repository] = lambda: InMemoryTripRepository(store)
    app.dependency_overrides[get_participant_repository] = lambda: InMemoryParticipantRepository(
        store
    )
    app.dependency_overrides[get_activity_repository] = lambda: InMemoryActivityRepository(store)
    app.dependency_overrides[get_link_repository] = lambda: InMemoryLinkRepository(store)
    app.dependency_overrides[get_mail_client] = lambda: mail_client

    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sqlite_session() -> AsyncGenerator[AsyncSession, None]:
    """Async session over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSession(engine) as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def postgres_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create async engine for PostgreSQL integration tests.

    Requires DATABASE_URL to be set to a real PostgreSQL connection string.
    Tests using this fixture should be marked with @pytest.mark.postgres.
    """
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        pytest.skip("DATABASE_URL not set - skipping postgres test")

    # Ensure it's a postgres URL
    if not database_url.startswith(("postgresql://", "postgresql+asyncpg://")):
        pytest.skip(f"DATABASE_URL is not PostgreSQL: {database_url}")

    # Convert to async driver if needed
    if database_url.startswith("postgresql://"):
        database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    engine = create_async_engine(
        database_url,
        poolclass=NullPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
