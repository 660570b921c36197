"""Error Handlers — the single place failures become user-visible pages.

Invariants:
    - BookshelfError → error page with the error's own status (404 → not-found page)
    - Unknown routes and malformed path ids → not-found page, 404
    - Exception (catch-all) → generic 500 page, never leaks internal details
    - Route handlers never render errors themselves; they raise

Design Decisions:
    - Three-layer handler: domain (BookshelfError), routing/validation, catch-all (Exception)
    - Extracted from main.py to keep the app module wiring-only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.api.templating import templates
from bookshelf.core.errors import BookshelfError, not_found

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookshelf_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: BookshelfError):
    """Render the page for a forwarded BookshelfError."""
    template = (
        "page-not-found.html"
        if exc.http_status == status.HTTP_404_NOT_FOUND
        else "error.html"
    )
    return templates.TemplateResponse(
        request, template, exc.to_context(), status_code=exc.http_status,
    )


def _register_bookshelf_error_handler(app: FastAPI) -> None:
    """Register Bookshelf domain/infrastructure error handler."""

    @app.exception_handler(BookshelfError)
    async def bookshelf_error_handler(request: Request, exc: BookshelfError):
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"BookshelfError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return render_error(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown routes, 405s)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(f"No route for {request.url.path}")
            return render_error(request, not_found())
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "title": str(exc.detail),
                "message": str(exc.detail),
                "code": "HTTP_ERROR",
                "status": exc.status_code,
            },
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation handler — a malformed path id finds nothing."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info(
            f"Request validation error on {request.url.path}: {exc.errors()}",
        )
        return render_error(request, not_found())


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "title": "Server Error",
                "message": "Sorry! There was an unexpected error on the server.",
                "code": "INTERNAL_ERROR",
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            },
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
