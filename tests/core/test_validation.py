"""Book Validation — BookIn rules and the pydantic-to-FieldError translator.

Tests:
    - title/author required after stripping
    - genre and year are optional; blank means None
    - year must parse as a whole number within -9999..9999
    - text fields are capped at 255 characters
    - translator keeps validator messages and field order
"""

import pytest
from pydantic import ValidationError

from bookshelf.core.domain_types import FieldError
from bookshelf.core.validation import translate_validation_error
from bookshelf.schemas.book import BookIn


def _errors(**fields) -> list[FieldError]:
    with pytest.raises(ValidationError) as exc_info:
        BookIn.model_validate(fields)
    return translate_validation_error(exc_info.value)


def test_valid_book_is_normalized():
    book = BookIn.model_validate(
        {"title": "  Dune ", "author": "Herbert", "genre": " ", "year": " 1965"},
    )
    assert book.title == "Dune"
    assert book.genre is None
    assert book.year == 1965


def test_blank_year_is_none():
    book = BookIn.model_validate({"title": "Dune", "author": "Herbert", "year": ""})
    assert book.year is None


def test_missing_title_is_reported():
    assert _errors(title="", author="Herbert") == [
        FieldError(field="title", message="Title is required"),
    ]


def test_whitespace_author_is_reported():
    assert _errors(title="Dune", author="   ") == [
        FieldError(field="author", message="Author is required"),
    ]


def test_every_failing_field_reported_in_order():
    errors = _errors(title="", author="", genre="", year="MCMLXV")
    assert [e.field for e in errors] == ["title", "author", "year"]
    assert errors[2].message == "Year must be a whole number"


def test_non_value_error_keeps_pydantic_message():
    with pytest.raises(ValidationError) as exc_info:
        BookIn.model_validate({"title": "Dune"})
    (error,) = translate_validation_error(exc_info.value)
    assert error.field == "author"
    assert error.message == "Field required"


@pytest.mark.parametrize("year", ["10000", "-10000", "99999999999999999999"])
def test_year_outside_range_is_reported(year):
    assert _errors(title="Dune", author="Herbert", year=year) == [
        FieldError(
            field="year",
            message="Year must be a whole number between -9999 and 9999",
        ),
    ]


def test_year_range_bounds_are_accepted():
    low = BookIn.model_validate({"title": "A", "author": "B", "year": "-9999"})
    high = BookIn.model_validate({"title": "A", "author": "B", "year": 9999})
    assert (low.year, high.year) == (-9999, 9999)


def test_overlong_genre_is_reported():
    assert _errors(title="Dune", author="Herbert", genre="g" * 256) == [
        FieldError(field="genre", message="Genre must be at most 255 characters"),
    ]


def test_length_is_measured_after_stripping():
    book = BookIn.model_validate(
        {"title": " " + "t" * 255 + " ", "author": "Herbert"},
    )
    assert len(book.title) == 255
