"""Domain Types — value types for books, drafts and field errors.

Invariants:
    - BookId wraps int — never use a bare int for identity in domain logic
    - BookRecord always has an id (it came from the store)
    - BookDraft holds submitted values verbatim (raw strings) so a rejected
      form can be re-rendered exactly as typed
    - Drafts are built by copying submitted fields, never by mutating a record

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - Frozen dataclasses: request-scoped copies cannot leak mutations
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)

# Largest id a 64-bit INTEGER primary key can hold
MAX_BOOK_ID = 2**63 - 1


# ─── Value Types ─────────────────────────────────────────────────

BOOK_FIELDS = ("title", "author", "genre", "year")

# Column limits shared by the ORM model and input validation
TEXT_MAX_LENGTH = 255
YEAR_MIN = -9999
YEAR_MAX = 9999


@dataclass(frozen=True)
class BookRecord:
    """A persisted book, as read from the store."""
    id: BookId
    title: str
    author: str
    genre: str | None = None
    year: int | None = None


@dataclass(frozen=True)
class BookDraft:
    """Unsaved book built from submitted form values."""
    title: str = ""
    author: str = ""
    genre: str = ""
    year: str = ""
    id: BookId | None = None

    @classmethod
    def from_form(
        cls, form: Mapping[str, object], book_id: BookId | None = None,
    ) -> "BookDraft":
        """Copy the book fields out of a submitted form. Missing fields become ''."""
        values = {}
        for name in BOOK_FIELDS:
            value = form.get(name)
            values[name] = "" if value is None else str(value)
        return cls(id=book_id, **values)

    def as_fields(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in BOOK_FIELDS}


@dataclass(frozen=True)
class FieldError:
    """One field-level validation failure."""
    field: str
    message: str
