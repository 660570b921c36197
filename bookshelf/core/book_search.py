"""Search Filter — a single free-text term matched against several book fields.

Invariants:
    - Matching is case-insensitive substring containment, OR across fields
    - A blank or whitespace-only term means "no filter"
    - The store translates a BookSearch into its own query language
"""

from dataclasses import dataclass

SEARCH_FIELDS = ("title", "author", "genre", "year")


@dataclass(frozen=True)
class BookSearch:
    term: str = ""
    fields: tuple[str, ...] = SEARCH_FIELDS

    @classmethod
    def from_query(cls, q: str | None) -> "BookSearch":
        return cls(term=(q or "").strip())

    @property
    def is_empty(self) -> bool:
        return not self.term
