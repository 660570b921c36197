"""Catalog Health — is the app up, and can it read the books table.

Invariants:
    - GET /health/ answers 200 while the process serves requests, naming
      the app and version it runs as
    - GET /health/ready answers 200 only when the books table can be counted;
      503 otherwise, with the reason
    - Readiness reads through SqlBookStore, the same path the list page uses

Design Decisions:
    - db_manager read through the module at call time (initialized by lifespan)
    - Counting books rather than SELECT 1: a reachable database with a
      missing or unmigrated books table is not ready
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import bookshelf.infrastructure.database as database
from bookshelf.core.book_search import BookSearch
from bookshelf.core.errors import DatabaseError
from bookshelf.infrastructure.book_store import SqlBookStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness(request: Request):
    """Count the catalog to prove the books table is reachable."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_unavailable")
    try:
        async with manager.session() as db:
            books = await SqlBookStore(db).count(BookSearch())
    except DatabaseError as e:
        logger.warning(
            f"Readiness failed: {e.message}",
            extra={"operation": e.operation, "path": request.url.path},
        )
        return _not_ready("books_table_unavailable")
    return {"status": "ready", "checks": {"database": "healthy", "books": books}}
