"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from travel_companion.core.logging import get_logger
from travel_companion.infrastructure.persistence.database import Base
from travel_companion.infrastructure.persistence.memory_store import InMemoryTravelStore
from travel_companion.infrastructure.persistence.models import TripModel

logger = get_logger(__name__)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database with foreign keys enforced, so the
    cascade and set-null rules behave as they do in a real deployment.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from travel_companion.infrastructure.api.app import app
    from travel_companion.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def isolated_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client that opens a new session for every request.

    Nothing is shared between requests through the session identity map,
    as in a deployed server.
    """
    from travel_companion.infrastructure.api.app import app
    from travel_companion.infrastructure.persistence.database import get_db_session

    session_factory = async_sessionmaker(
        db_session.bind, class_=AsyncSession, expire_on_commit=False
    )

    async def _request_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _request_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def trip(db_session: AsyncSession) -> TripModel:
    """Persist a trip that groups can reference."""
    model = TripModel(
        source="Berlin",
        destination="Munich",
        travel_date="2026-11-02",
        travel_time="08:30",
        transport_mode="car",
        optimization_mode="fastest",
        source_coordinates="52.52,13.405",
        destination_coordinates="48.137,11.575",
    )
    db_session.add(model)
    await db_session.commit()
    await db_session.refresh(model)
    return model


@pytest.fixture
def memory_store() -> InMemoryTravelStore:
    """Create an empty in-memory store."""
    return InMemoryTravelStore()
