"""Service test fixtures — async DB, catalogue state + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a freshly seeded catalogue
    - ledger and store share test_db, as they share the request session in the API
    - get_db and get_catalogue dependencies overridden to use the test instances
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for ledger tests
    - StaticPool: every session shares the one in-memory connection
    - Catalogue administrator is "admin", base URI "https://x/"
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from folio.db.base import Base
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.infrastructure.database import get_db, DatabaseSessionManager
from folio.infrastructure.ledger_repository import SqlLedgerRepository
from folio.services.catalogue_state import get_catalogue, load_catalogue
import folio.infrastructure.database as db_module
import folio.models  # noqa: F401
from folio.main import app

from tests.services.fake_ledger import ADMIN, BASE_URI, RecordingLedger


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def ledger(test_db):
    return SqlLedgerRepository(test_db)


@pytest.fixture
async def store(test_db):
    return SqlCatalogueStore(test_db)


@pytest.fixture
async def catalogue(store):
    return await load_catalogue(store, BASE_URI, ADMIN)


@pytest.fixture
async def client(test_engine, test_session_factory, catalogue):
    """FastAPI test client with DB and catalogue dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalogue] = lambda: catalogue

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
def recording_ledger():
    return RecordingLedger()
