"""Book ORM — the single persisted entity of the catalog.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - title and author are non-nullable (validated before write as well)
    - created_at/updated_at maintained by the ORM, not by forms
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.core.domain_types import TEXT_MAX_LENGTH
from bookshelf.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(Base):
    """A book in the catalog."""
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(TEXT_MAX_LENGTH), nullable=False)
    author: Mapped[str] = mapped_column(String(TEXT_MAX_LENGTH), nullable=False)
    genre: Mapped[str | None] = mapped_column(String(TEXT_MAX_LENGTH), nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
