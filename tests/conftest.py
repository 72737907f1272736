"""Shared pytest fixtures for the YouPick test suite.

Provides:
- db_engine: file-backed SQLite async engine with all tables (separate
  connections, so concurrent mutations really contend)
- session_factory / sql_store / memory_store: the two space store backends
- store: parametrized over both backends
- service: SpaceService over ``store``
- client: AsyncClient with the space store overridden to the SQL test store
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from youpick.api.dependencies import get_space_store
from youpick.db.session import Base, build_session_factory
import youpick.db.tables  # noqa: F401: register ORM models on Base.metadata
from youpick.spaces.namespace import derive_namespace_key
from youpick.spaces.service import SpaceService
from youpick.stores.memory import MemorySpaceStore
from youpick.stores.sql import SqlSpaceStore

SECRET = "correct horse battery staple"
SECRET_HEADER = "X-Password"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def db_engine(tmp_path):
    """Create a SQLite database file with all tables."""
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'youpick.db'}",
        connect_args={"timeout": 30},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
def sql_store(session_factory) -> SqlSpaceStore:
    return SqlSpaceStore(session_factory, max_attempts=50)


@pytest.fixture
def memory_store() -> MemorySpaceStore:
    return MemorySpaceStore()


@pytest.fixture(params=["sql", "memory"])
def store(request, sql_store, memory_store):
    return sql_store if request.param == "sql" else memory_store


@pytest.fixture
def service(store) -> SpaceService:
    return SpaceService(store)


@pytest.fixture
def key() -> str:
    return derive_namespace_key(SECRET)


@pytest.fixture
async def client(sql_store):
    """AsyncClient with get_space_store overridden to use the test store."""
    from youpick.api.main import app

    app.dependency_overrides[get_space_store] = lambda: sql_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={SECRET_HEADER: SECRET},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
