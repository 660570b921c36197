"""API test fixtures — FastAPI test client over the per-test database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness checks hit the test database

Design Decisions:
    - Lifespan is not run by ASGITransport; everything it would set up is
      provided here instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

import bookshelf.infrastructure.database as db_module
from bookshelf.infrastructure.database import get_db, DatabaseSessionManager
from bookshelf.main import app


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
def dune_form():
    return {
        "title": "Dune",
        "author": "Herbert",
        "genre": "Sci-Fi",
        "year": "1965",
    }
