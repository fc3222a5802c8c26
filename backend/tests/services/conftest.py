"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: same engine family as production, no files left behind
    - ASGITransport skips lifespan: no seeding, no logging setup during tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from nurse_registry.client.api_client import NurseApiClient
from nurse_registry.db.base import Base
from nurse_registry.infrastructure.database import get_db, DatabaseSessionManager
from nurse_registry.models.nurse import Nurse
from nurse_registry.services.nurse_store import NurseStore
import nurse_registry.infrastructure.database as db_module
from nurse_registry.main import app

from tests.services.sample_nurses import ANN_LEE


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return NurseStore(test_db)


@pytest.fixture
async def asgi_transport(test_engine, test_session_factory):
    """ASGI transport into the app with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield ASGITransport(app=app)

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(asgi_transport):
    """Raw HTTP test client."""
    async with AsyncClient(
        transport=asgi_transport, base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def api_client(asgi_transport):
    """Typed NurseApiClient wired to the in-process app."""
    async with NurseApiClient("http://test", transport=asgi_transport) as api:
        yield api


@pytest.fixture
async def seed_nurse(test_db):
    """Insert Ann Lee directly into the test DB."""
    nurse = Nurse(**ANN_LEE)
    test_db.add(nurse)
    await test_db.commit()
    await test_db.refresh(nurse)
    return nurse
