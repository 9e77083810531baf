"""
Tests for settings and database URL handling
"""

import pytest

from booksapi.config import Settings
from booksapi.database.connection import (
    check_database_connection,
    get_database_url,
    reset_database,
    to_async_url,
)


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BOOKSAPI_API_PORT", "9000")
    monkeypatch.setenv("BOOKSAPI_DEBUG", "false")

    settings = Settings()

    assert settings.api_port == 9000
    assert settings.debug is False


def test_environment_database_url_wins(monkeypatch):
    monkeypatch.setenv("BOOKSAPI_DATABASE_URL", "postgresql://u:p@db:5432/books")

    assert get_database_url() == "postgresql://u:p@db:5432/books"


def test_to_async_url():
    assert to_async_url("postgresql://u:p@db/books") == "postgresql+asyncpg://u:p@db/books"
    assert to_async_url("sqlite+aiosqlite:///books.db") == "sqlite+aiosqlite:///books.db"


@pytest.mark.asyncio
async def test_check_database_connection_before_init():
    reset_database()

    assert await check_database_connection() == (False, "Database engine not initialized")


@pytest.mark.asyncio
async def test_check_database_connection_succeeds(sqlite_database):
    assert await check_database_connection() == (True, None)
