"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Seeding and assertions use short-lived sessions, never the request's

Design Decisions:
    - File database over :memory: so independent connections see one schema
"""

import os

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from bookshelf.db.base import Base  # noqa: E402
from bookshelf.models.book import Book as BookModel  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'books.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
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
def seed_books(test_session_factory):
    """Insert rows directly; returns their ids in insertion order."""
    async def _seed(*books: dict) -> list[int]:
        async with test_session_factory() as session:
            models = [BookModel(**book) for book in books]
            session.add_all(models)
            await session.commit()
            return [m.id for m in models]
    return _seed


@pytest.fixture
def fetch_book(test_session_factory):
    """Read a row back through a fresh session (None when absent)."""
    async def _fetch(book_id: int) -> BookModel | None:
        async with test_session_factory() as session:
            return await session.get(BookModel, book_id)
    return _fetch


@pytest.fixture
def count_books(test_session_factory):
    async def _count() -> int:
        async with test_session_factory() as session:
            return await session.scalar(
                select(func.count()).select_from(BookModel),
            )
    return _count
