"""Book Schemas — field-level validation applied before anything is written.

Invariants:
    - BookIn.title and BookIn.author: stripped, non-empty, at most 255 chars
    - BookIn.genre: stripped, blank -> None, at most 255 chars
    - BookIn.year: blank -> None, otherwise a whole number in -9999..9999
    - Nothing that passes here can be refused by the columns for its size
    - Validators raise ValueError with a user-facing message; the translator
      surfaces that message verbatim

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - Input is always raw strings from a BookDraft, so "before" validators
      own the parsing
"""

from pydantic import BaseModel, field_validator

from bookshelf.core.domain_types import TEXT_MAX_LENGTH, YEAR_MAX, YEAR_MIN


def _check_length(label: str, v: str) -> str:
    if len(v) > TEXT_MAX_LENGTH:
        raise ValueError(
            f"{label} must be at most {TEXT_MAX_LENGTH} characters",
        )
    return v


class BookIn(BaseModel):
    """Validated book fields, ready for persistence."""
    title: str
    author: str
    genre: str | None = None
    year: int | None = None

    @field_validator("title", "author", mode="before")
    @classmethod
    def require_text(cls, v: object, info) -> str:
        v = "" if v is None else str(v).strip()
        if not v:
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return _check_length(info.field_name.capitalize(), v)

    @field_validator("genre", mode="before")
    @classmethod
    def blank_genre_is_none(cls, v: object) -> str | None:
        if v is None:
            return None
        v = str(v).strip()
        return _check_length("Genre", v) if v else None

    @field_validator("year", mode="before")
    @classmethod
    def parse_year(cls, v: object) -> int | None:
        if v is None:
            return None
        if isinstance(v, int):
            year = v
        else:
            v = str(v).strip()
            if not v:
                return None
            try:
                year = int(v)
            except ValueError:
                raise ValueError("Year must be a whole number") from None
        if not YEAR_MIN <= year <= YEAR_MAX:
            raise ValueError(
                f"Year must be a whole number between {YEAR_MIN} and {YEAR_MAX}",
            )
        return year
