"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Route handlers reach persistence only through BookStore
    - create/update raise BookValidationError for rejected fields and
      DatabaseError for driver failures; get returns None for absence

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from bookshelf.core.book_search import BookSearch
from bookshelf.core.domain_types import BookDraft, BookId, BookRecord


class BookStore(Protocol):
    """Contract for book persistence — implemented by infrastructure."""
    async def count(self, search: BookSearch) -> int: ...
    async def list(
        self, search: BookSearch, offset: int, limit: int,
    ) -> list[BookRecord]: ...
    async def get(self, book_id: BookId) -> BookRecord | None: ...
    async def create(self, draft: BookDraft) -> BookRecord: ...
    async def update(self, book_id: BookId, draft: BookDraft) -> BookRecord: ...
    async def delete(self, book_id: BookId) -> None: ...
