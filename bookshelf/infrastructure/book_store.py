"""SQL Book Store — BookStore implementation over an AsyncSession.

Invariants:
    - Submitted fields are validated (schemas/book.py) before any row is touched;
      a rejected draft raises BookValidationError and writes nothing
    - Every SQLAlchemy failure is rolled back and raised as DatabaseError
    - Rows leave this module as BookRecord values, never as ORM instances
    - Listing order is ascending id

Design Decisions:
    - One store per request, built from the request's session by get_book_store
    - Search clause built here: it is the only place that knows column types
      (year is matched through its text form)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy import ColumnElement, String, cast, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.book_search import BookSearch
from bookshelf.core.domain_types import BookDraft, BookId, BookRecord
from bookshelf.core.errors import BookValidationError, not_found
from bookshelf.core.repository_protocols import BookStore
from bookshelf.core.validation import translate_validation_error
from bookshelf.infrastructure.database import get_db, translate_db_error
from bookshelf.models.book import Book as BookModel
from bookshelf.schemas.book import BookIn

logger = logging.getLogger(__name__)

_SEARCH_COLUMNS = {
    "title": BookModel.title,
    "author": BookModel.author,
    "genre": BookModel.genre,
    "year": cast(BookModel.year, String),
}


def build_search_clause(search: BookSearch) -> ColumnElement[bool] | None:
    """Case-insensitive substring match on any searchable column, or None."""
    if search.is_empty:
        return None
    return or_(*(
        _SEARCH_COLUMNS[name].icontains(search.term, autoescape=True)
        for name in search.fields
    ))


def validate_draft(draft: BookDraft) -> BookIn:
    """Validate submitted fields, raising the recoverable validation variant."""
    try:
        return BookIn.model_validate(draft.as_fields())
    except ValidationError as e:
        raise BookValidationError(translate_validation_error(e)) from e


def _to_record(model: BookModel) -> BookRecord:
    return BookRecord(
        id=BookId(model.id),
        title=model.title,
        author=model.author,
        genre=model.genre,
        year=model.year,
    )


class SqlBookStore:
    """Book persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise translate_db_error(e, operation) from e

    async def count(self, search: BookSearch) -> int:
        stmt = select(func.count()).select_from(BookModel)
        clause = build_search_clause(search)
        if clause is not None:
            stmt = stmt.where(clause)
        async with self._guard("count"):
            return (await self._db.scalar(stmt)) or 0

    async def list(
        self, search: BookSearch, offset: int, limit: int,
    ) -> list[BookRecord]:
        stmt = select(BookModel).order_by(BookModel.id)
        clause = build_search_clause(search)
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.offset(offset).limit(limit)
        async with self._guard("list"):
            result = await self._db.execute(stmt)
            return [_to_record(m) for m in result.scalars().all()]

    async def get(self, book_id: BookId) -> BookRecord | None:
        async with self._guard("get"):
            model = await self._db.get(BookModel, book_id)
        return _to_record(model) if model else None

    async def create(self, draft: BookDraft) -> BookRecord:
        fields = validate_draft(draft)
        async with self._guard("create"):
            model = BookModel(**fields.model_dump())
            self._db.add(model)
            await self._db.commit()
            await self._db.refresh(model)
        logger.info("Book created", extra={"book_id": model.id})
        return _to_record(model)

    async def update(self, book_id: BookId, draft: BookDraft) -> BookRecord:
        fields = validate_draft(draft)
        async with self._guard("update"):
            model = await self._db.get(BookModel, book_id)
            if model is None:
                raise not_found()
            for name, value in fields.model_dump().items():
                setattr(model, name, value)
            await self._db.commit()
            await self._db.refresh(model)
        logger.info("Book updated", extra={"book_id": book_id})
        return _to_record(model)

    async def delete(self, book_id: BookId) -> None:
        async with self._guard("delete"):
            model = await self._db.get(BookModel, book_id)
            if model is None:
                raise not_found()
            await self._db.delete(model)
            await self._db.commit()
        logger.info("Book deleted", extra={"book_id": book_id})


def get_book_store(db: AsyncSession = Depends(get_db)) -> BookStore:
    """FastAPI dependency: the request's BookStore."""
    return SqlBookStore(db)
