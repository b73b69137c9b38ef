"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager initialized for the readiness probe, which bypasses get_db
    - seed_sheet writes rows exactly as given: row 1 is whatever comes first

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (FOR UPDATE is compiled away on SQLite)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from registry_api.db.base import Base
from registry_api.infrastructure.database import get_db, DatabaseSessionManager
from registry_api.models.sheet import CELL_ATTRIBUTES, Sheet, SheetRowModel
import registry_api.infrastructure.database as db_module
from registry_api.main import app

from tests.services.fake_sheet import HEADER


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
def seed_sheet(test_session_factory):
    """Factory: create a sheet and its rows, numbered from 1 in list order."""

    async def _seed(rows: list[list], name: str = "REGISTRY") -> Sheet:
        async with test_session_factory() as db:
            sheet = Sheet(name=name)
            db.add(sheet)
            await db.flush()
            for number, cells in enumerate(rows, start=1):
                if cells is None:
                    continue
                model = SheetRowModel(sheet_id=sheet.id, row_number=number)
                for attr, value in zip(CELL_ATTRIBUTES, cells):
                    setattr(model, attr, value)
                db.add(model)
            await db.commit()
            return sheet

    return _seed


@pytest.fixture
def read_row(test_session_factory):
    """Factory: fetch the raw cells of one stored row (None if absent)."""

    async def _read(sheet_id: int, row_number: int) -> tuple | None:
        async with test_session_factory() as db:
            model = await db.get(SheetRowModel, (sheet_id, row_number))
            return model.cells() if model else None

    return _read


@pytest.fixture
def header() -> list[str]:
    return list(HEADER)
