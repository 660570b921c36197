"""Domain Types — drafts, records and search terms.

Tests:
    - BookDraft.from_form copies exactly the book fields, '' for missing
    - Drafts are immutable and carry an optional original id
    - BookSearch strips its term and treats blank as no filter
"""

import dataclasses

import pytest

from bookshelf.core.book_search import SEARCH_FIELDS, BookSearch
from bookshelf.core.domain_types import BookDraft, BookId, BookRecord


def test_draft_from_form_fills_missing_fields():
    draft = BookDraft.from_form({"title": "Dune", "year": 1965, "extra": "x"})
    assert draft == BookDraft(title="Dune", author="", genre="", year="1965")
    assert draft.id is None


def test_draft_from_form_keeps_original_id():
    draft = BookDraft.from_form({"title": ""}, book_id=BookId(7))
    assert draft.id == 7


def test_draft_none_values_become_empty():
    assert BookDraft.from_form({"genre": None}).genre == ""


def test_draft_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BookDraft().title = "Dune"


def test_draft_as_fields_excludes_id():
    draft = BookDraft(title="Dune", author="Herbert", id=BookId(3))
    assert draft.as_fields() == {
        "title": "Dune", "author": "Herbert", "genre": "", "year": "",
    }


def test_record_optional_fields_default_to_none():
    record = BookRecord(id=BookId(1), title="Emma", author="Jane Austen")
    assert record.genre is None
    assert record.year is None


def test_search_strips_term():
    assert BookSearch.from_query("  dune ").term == "dune"


@pytest.mark.parametrize("q", [None, "", "   "])
def test_blank_search_is_empty(q):
    assert BookSearch.from_query(q).is_empty


def test_search_covers_all_text_fields():
    assert SEARCH_FIELDS == ("title", "author", "genre", "year")
