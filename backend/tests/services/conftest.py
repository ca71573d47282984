"""Service test fixtures — async DB, FastAPI test client and in-memory store.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - memory_store is an in-process UsuarioStore double that records every write

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

from datetime import date, datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app
from app.services.usuario_service import UsuarioService

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
FIXED_TODAY = date(2026, 10, 18)


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


class InMemoryUsuarioStore:
    """UsuarioStore double: dict-backed, unique email enforced like the DB index."""

    def __init__(self):
        self.rows = {}
        self.writes: list[tuple[str, object]] = []

    async def find_by_id(self, usuario_id):
        return self.rows.get(usuario_id)

    async def find_by_email(self, email):
        return next((u for u in self.rows.values() if u.email == email), None)

    async def list_active(self):
        return [u for u in self.rows.values() if u.ativo]

    async def insert(self, usuario):
        if any(u.email == usuario.email for u in self.rows.values()):
            raise IntegrityError("INSERT INTO usuarios", {}, Exception("UNIQUE"))
        self.rows[usuario.id] = usuario
        self.writes.append(("insert", usuario.id))
        return usuario

    async def update(self, usuario):
        if any(
            u.email == usuario.email and u.id != usuario.id
            for u in self.rows.values()
        ):
            raise IntegrityError("UPDATE usuarios", {}, Exception("UNIQUE"))
        self.writes.append(("update", usuario.id))
        return usuario


@pytest.fixture
def memory_store():
    return InMemoryUsuarioStore()


@pytest.fixture
def service(memory_store):
    return UsuarioService(
        memory_store, now=lambda: FIXED_NOW, today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def fixed_today():
    return FIXED_TODAY
