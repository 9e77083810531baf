"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry

from booksapi.database.connection import get_async_engine, init_database, reset_database
from booksapi.dbmodels import Awards, Base, Books
from booksapi.enums import AwardName, GenreName, LanguageName, PublishingFormat
from booksapi.services.award import AwardService


@pytest.fixture
def award_service() -> MagicMock:
    """AwardService double; its coroutine methods are AsyncMocks via the spec."""
    return MagicMock(spec=AwardService)


@pytest.fixture
def mock_info(award_service: MagicMock) -> MagicMock:
    """Create a mock GraphQL info object carrying the award service."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "award_service": award_service}
    return info


@pytest.fixture
def sample_book() -> Books:
    return Books(
        id=7,
        title="TestTitle",
        language=LanguageName.AFRIKAANS,
        blurb="Blurb",
        genre=GenreName.ADVENTURE,
        publishing_format=PublishingFormat.HARDCOVER,
    )


@pytest.fixture
def sample_award(sample_book: Books) -> Awards:
    return Awards(
        id=1,
        award_name=AwardName.ORWELL_PRIZE,
        category="test",
        year=2010,
        books={sample_book},
    )


@pytest_asyncio.fixture
async def sqlite_database(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at a fresh SQLite database with all tables."""
    dsn = f"sqlite+aiosqlite:///{tmp_path / 'booksapi.db'}"

    reset_database()
    init_database(dsn, force_reinit=True)

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield dsn

    await engine.dispose()
    reset_database()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
