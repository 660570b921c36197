"""Settings — environment overrides and async driver URL mapping."""

from bookshelf.config import Settings


def test_postgres_url_uses_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/books")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/books"


def test_plain_sqlite_url_uses_aiosqlite():
    settings = Settings(database_url="sqlite:///./books.db")
    assert settings.database_url == "sqlite+aiosqlite:///./books.db"


def test_async_url_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_CREATE_TABLES", "false")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.database_create_tables is False
