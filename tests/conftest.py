"""Pytest fixtures backed by a throwaway SQLite database per test.

Each test gets its own database file, so services can open as many sessions
as they like (the list endpoints use two at once) without sharing state
across tests.
"""

import os

os.environ.setdefault("ENV", "dev")
os.environ.setdefault("AUTO_INIT_DB", "false")

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.schemas.staff import Staff
from app.services.project_service import ProjectService
from app.services.season_service import SeasonService
from app.utils.db_async import build_engine, build_session_factory, init_db
from tests.factories import create_staff


@pytest_asyncio.fixture()
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Yield an engine bound to a fresh SQLite database with all tables."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture()
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(async_engine)


@pytest_asyncio.fixture()
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session used by tests to seed rows and inspect results."""
    async with session_factory() as session:
        yield session


@pytest.fixture()
def project_service(session_factory: async_sessionmaker[AsyncSession]) -> ProjectService:
    return ProjectService(session_factory)


@pytest.fixture()
def season_service(session_factory: async_sessionmaker[AsyncSession]) -> SeasonService:
    return SeasonService(session_factory)


@pytest_asyncio.fixture()
async def staff(db_session: AsyncSession) -> Staff:
    """Active staff member acting on the services."""
    return await create_staff(db_session, email="coordinator@example.com")


@pytest_asyncio.fixture()
async def app_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client with the application wired to the test database."""
    from app.main import app
    from app.routes.deps import get_session_factory

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_session_factory, None)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Ensure HTTPX uses asyncio backend during tests."""
    return "asyncio"
