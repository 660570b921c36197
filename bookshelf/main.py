"""Bookshelf — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every forwarded failure (api/error_handlers.py)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup only when database_create_tables is set;
      Alembic migrations own the schema otherwise
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.api.routes import books, health, index
from bookshelf.api.templating import STATIC_DIR
from bookshelf.config import get_settings
from bookshelf.infrastructure.database import init_db
from bookshelf.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Bookshelf started")
    yield
    logger.info("Bookshelf shutting down")
    await manager.dispose()


app = FastAPI(title=get_settings().app_title, version="1.0.0", lifespan=lifespan)

app.include_router(index.router)
app.include_router(health.router)
app.include_router(books.router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

register_error_handlers(app)
