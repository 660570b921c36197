"""Book Routes — list, create, edit, update and delete flows for the catalog.

Invariants:
    - Handlers reach persistence only through the injected BookStore
    - Only BookValidationError is handled here (re-render with the submitted
      draft and its field errors); every other failure propagates to the
      global error handlers
    - Absence is signalled with not_found() before any write is attempted
    - Successful writes answer with 303 See Other (post/redirect/get)

Design Decisions:
    - /new routes declared before /{book_id} so "new" is never parsed as an id
    - Form fields read individually with Form(""): missing fields arrive as ""
      and are rejected by validation, not by the framework
    - Path ids bounded to the INTEGER key range; anything else is a 404
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path, Query, Request, status
from fastapi.responses import RedirectResponse

from bookshelf.api.templating import templates
from bookshelf.core.book_search import BookSearch
from bookshelf.core.domain_types import MAX_BOOK_ID, BookDraft, BookId
from bookshelf.core.errors import BookValidationError, not_found
from bookshelf.core.pagination import normalize_page, paginate
from bookshelf.core.repository_protocols import BookStore
from bookshelf.infrastructure.book_store import get_book_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])

# Ids outside the primary key range are rejected as unknown routes
BookIdPath = Annotated[int, Path(ge=1, le=MAX_BOOK_ID)]


def _book_form(
    title: str = Form(""),
    author: str = Form(""),
    genre: str = Form(""),
    year: str = Form(""),
) -> BookDraft:
    return BookDraft(title=title, author=author, genre=genre, year=year)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("")
async def list_books(
    request: Request,
    q: str = Query(""),
    page: str | None = Query(None),
    store: BookStore = Depends(get_book_store),
):
    """Paginated, optionally filtered list of books."""
    search = BookSearch.from_query(q)
    page_number = normalize_page(page)
    total = await store.count(search)
    window = paginate(total, page_number)
    books = await store.list(search, window.offset, window.limit)
    return templates.TemplateResponse(
        request,
        "books/index.html",
        {
            "title": "Books",
            "books": books,
            "q": search.term,
            "page": window.page,
            "total_pages": window.total_pages,
            "total": total,
        },
    )


@router.get("/new")
async def new_book_form(request: Request):
    """Blank creation form."""
    return templates.TemplateResponse(
        request, "books/new-book.html",
        {"title": "New Book", "book": BookDraft(), "errors": []},
    )


@router.post("/new")
async def create_book(
    request: Request,
    draft: BookDraft = Depends(_book_form),
    store: BookStore = Depends(get_book_store),
):
    """Create a book, or re-render the form with field errors."""
    try:
        book = await store.create(draft)
    except BookValidationError as e:
        logger.info(f"Rejected new book: {e.message}")
        return templates.TemplateResponse(
            request, "books/new-book.html",
            {"title": "New Book", "book": draft, "errors": e.field_errors},
        )
    return _redirect(f"/books/{book.id}")


@router.get("/{book_id}")
async def edit_book_form(
    request: Request,
    book_id: BookIdPath,
    store: BookStore = Depends(get_book_store),
):
    """Update form pre-filled with the stored book."""
    book = await store.get(BookId(book_id))
    if book is None:
        raise not_found()
    return templates.TemplateResponse(
        request, "books/update-book.html",
        {"title": "Update Book", "book": book, "errors": []},
    )


@router.post("/{book_id}")
async def update_book(
    request: Request,
    book_id: BookIdPath,
    draft: BookDraft = Depends(_book_form),
    store: BookStore = Depends(get_book_store),
):
    """Update a book in place, or re-render the form with field errors."""
    book_id = BookId(book_id)
    if await store.get(book_id) is None:
        raise not_found()
    try:
        await store.update(book_id, draft)
    except BookValidationError as e:
        logger.info(
            f"Rejected update: {e.message}", extra={"book_id": book_id},
        )
        rejected = BookDraft.from_form(draft.as_fields(), book_id=book_id)
        return templates.TemplateResponse(
            request, "books/update-book.html",
            {"title": "Update Book", "book": rejected, "errors": e.field_errors},
        )
    return _redirect(f"/books/{book_id}")


@router.post("/{book_id}/delete")
async def delete_book(
    book_id: BookIdPath,
    store: BookStore = Depends(get_book_store),
):
    """Permanently remove a book."""
    book_id = BookId(book_id)
    if await store.get(book_id) is None:
        raise not_found()
    await store.delete(book_id)
    return _redirect("/")
