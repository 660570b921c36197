"""Error Hierarchy — typed, categorized exceptions for every Bookshelf failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The hierarchy is closed: validation (recoverable), not-found, database (other)
    - Only BookValidationError is recovered inside a route handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookshelfError base: one global handler renders all
    - Store adapter picks the variant at the boundary, routes switch on the type
"""

from enum import Enum

from bookshelf.core.domain_types import FieldError


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class BookshelfError(Exception):
    """Base exception for all Bookshelf errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_context(self) -> dict:
        """Template context for the centralized error page."""
        return {
            "title": self.message,
            "message": self.message,
            "code": self.code,
            "status": self.http_status,
        }


class BookValidationError(BookshelfError):
    """Submitted book fields violate required-field or format constraints."""
    def __init__(self, field_errors: list[FieldError]):
        super().__init__(
            "Book validation failed: "
            + ", ".join(e.field for e in field_errors),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field_errors = field_errors


class BookNotFoundError(BookshelfError):
    """Lookup by identifier yielded no record."""
    def __init__(self, message: str = "Not Found"):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )


class DatabaseError(BookshelfError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation

    def to_context(self) -> dict:
        # driver details stay in the logs
        return {
            "title": "Service Unavailable",
            "message": "The book catalog is temporarily unavailable.",
            "code": self.code,
            "status": self.http_status,
        }


def not_found(message: str = "Not Found") -> BookNotFoundError:
    """Build the not-found signal forwarded to the error renderer."""
    return BookNotFoundError(message)
